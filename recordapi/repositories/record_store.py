"""In-memory id -> record mapping. No locking: callers serialize access (see core.guard)."""
from __future__ import annotations

from typing import Callable, Dict, Generic, List, Optional, TypeVar

from recordapi.domain.records import Record, RecordId

R = TypeVar("R", bound=Record)


class RecordStore(Generic[R]):
    """Upsert-only collection of immutable records keyed by their ``id``."""

    def __init__(self, records: Optional[Dict[RecordId, R]] = None) -> None:
        self._records: Dict[RecordId, R] = dict(records or {})

    def insert(self, record: R) -> None:
        self._records[record.id] = record

    def get(self, record_id: RecordId) -> Optional[R]:
        return self._records.get(record_id)

    def get_all(self) -> List[R]:
        return list(self._records.values())

    def update(self, record: R) -> None:
        # Same as insert: no existence check on purpose.
        self._records[record.id] = record

    def delete(self, record_id: RecordId) -> None:
        self._records.pop(record_id, None)

    def find_first(self, predicate: Callable[[R], bool]) -> Optional[R]:
        for record in self._records.values():
            if predicate(record):
                return record
        return None

    def as_dict(self) -> Dict[RecordId, R]:
        return dict(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecordStore):
            return NotImplemented
        return self._records == other._records
