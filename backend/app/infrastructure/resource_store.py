"""Resource Store — ordered in-memory collection of records keyed by `id`.

Invariants:
    - Insertion order is preserved; list() returns the live sequence (no snapshot)
    - The store performs NO uniqueness check: ids come from IdGenerator
    - remove_at(index) removes exactly one record and shifts the rest left

Design Decisions:
    - Plain list, no locking: pipelines run to completion on the event loop
      without awaiting, so no two requests interleave store mutations
      (ADR: single-process uvicorn, state lost on restart)
    - Satisfies core.repository_protocols.RecordStore structurally, so a
      database-backed store can replace it without touching the pipeline
"""

import logging
from typing import Generic, Iterable, TypeVar

from app.core.repository_protocols import HasId

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=HasId)


class ResourceStore(Generic[RecordT]):
    """Mutable ordered record collection for one resource type."""

    def __init__(self, name: str, records: Iterable[RecordT] = ()):
        self.name = name
        self._records: list[RecordT] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> list[RecordT]:
        return self._records

    def find_by_id(self, record_id: str) -> RecordT | None:
        return next((r for r in self._records if r.id == record_id), None)

    def index_by_id(self, record_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        return None

    def append(self, record: RecordT) -> None:
        self._records.append(record)

    def remove_at(self, index: int) -> RecordT:
        return self._records.pop(index)

    def reset(self, records: Iterable[RecordT] = ()) -> None:
        """Replace all records (startup seeding, test isolation)."""
        self._records = list(records)
        logger.debug(
            f"Store '{self.name}' reset with {len(self._records)} record(s)",
        )
