"""Infrastructure Layer — in-memory stores, id generation, logging setup.

Invariants:
    - Infrastructure depends on core types, never on api/ or services/

Design Decisions:
    - Stores satisfy core.repository_protocols structurally, so they can be swapped
"""
