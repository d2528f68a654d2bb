"""Services Layer — terminal resource handlers.

Invariants:
    - Handlers run only after their pipeline passed; they never validate
    - One handler module per resource
"""
