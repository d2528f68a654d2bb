"""GrubDash Application Package — dishes and orders API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
