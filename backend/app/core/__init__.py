"""Core Layer — pure domain logic: records, validators, pipelines. No IO, no async.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Validators are pure except for writing resolved state into the request context

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
