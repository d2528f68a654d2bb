"""Identifier Generator — process-wide unique hex identifiers.

Invariants:
    - next() never returns an id it has returned or reserved before
    - Ids are 32-char lowercase hex (16 random bytes)
    - One generator instance is shared by dishes and orders

Design Decisions:
    - Random hex plus an issued-id set over a bare counter: ids stay opaque to
      clients and collisions are excluded structurally, not probabilistically
    - threading.Lock: the pipeline is single-threaded, but generation must stay
      safe if called from a threadpool (e.g. sync dependencies)
"""

import secrets
import threading


class IdGenerator:
    """Produces identifiers unique for the lifetime of the process."""

    def __init__(self, nbytes: int = 16):
        self._nbytes = nbytes
        self._issued: set[str] = set()
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            candidate = secrets.token_hex(self._nbytes)
            while candidate in self._issued:
                candidate = secrets.token_hex(self._nbytes)
            self._issued.add(candidate)
            return candidate

    def reserve(self, identifier: str) -> None:
        """Mark an externally created id (e.g. seed data) as taken."""
        with self._lock:
            self._issued.add(identifier)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._issued
