"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - Validators resolve records through RecordLookup; handlers mutate through RecordStore

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory ResourceStore satisfies
      it without inheriting from it (ADR: persistence swap-in targets this contract only)
"""

from typing import Protocol, Sequence, TypeVar


class HasId(Protocol):
    """Any record with a string identifier."""
    id: str


RecordT = TypeVar("RecordT", bound=HasId)


class RecordLookup(Protocol[RecordT]):
    """Read-side contract used by existence validators."""
    def find_by_id(self, record_id: str) -> RecordT | None: ...


class RecordStore(RecordLookup[RecordT], Protocol[RecordT]):
    """Full store contract used by terminal handlers."""
    def list(self) -> Sequence[RecordT]: ...
    def index_by_id(self, record_id: str) -> int | None: ...
    def append(self, record: RecordT) -> None: ...
    def remove_at(self, index: int) -> RecordT: ...


class IdSource(Protocol):
    """Contract for identifier generation."""
    def next(self) -> str: ...
