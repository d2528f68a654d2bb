"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses share the {"error": message} shape

Design Decisions:
    - Thin routes: build context, run pipeline, delegate to handlers
"""
