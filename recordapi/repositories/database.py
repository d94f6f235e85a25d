"""
The full set of collections held by one service process.

``Database`` knows how to turn itself into the snapshot document and back;
``repositories.json_storage`` decides where that document lives.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Type

from pydantic import ValidationError

from recordapi.domain.records import GameState, Record, Task, User
from recordapi.repositories.record_store import RecordStore

COLLECTIONS: Dict[str, Type[Record]] = {
    "tasks": Task,
    "users": User,
    "games": GameState,
}


class SnapshotFormatError(ValueError):
    """The snapshot document does not match the expected layout."""


class Database:
    """Tasks, users and games. Each deployment only touches the collections it serves."""

    def __init__(
        self,
        tasks: Optional[RecordStore[Task]] = None,
        users: Optional[RecordStore[User]] = None,
        games: Optional[RecordStore[GameState]] = None,
    ) -> None:
        self.tasks: RecordStore[Task] = tasks if tasks is not None else RecordStore()
        self.users: RecordStore[User] = users if users is not None else RecordStore()
        self.games: RecordStore[GameState] = games if games is not None else RecordStore()

    def find_user_by_name(self, username: str) -> Optional[User]:
        """First user with that name in iteration order. Usernames are not unique."""
        return self.users.find_first(lambda user: user.username == username)

    def to_document(self) -> Dict[str, Dict[str, Any]]:
        document: Dict[str, Dict[str, Any]] = {}
        for name in COLLECTIONS:
            store: RecordStore = getattr(self, name)
            document[name] = {str(rid): record.model_dump(mode="json") for rid, record in store.as_dict().items()}
        return document

    @classmethod
    def from_document(cls, document: Any) -> "Database":
        """Build a database from a decoded snapshot. Any inconsistency rejects the whole document."""
        if not isinstance(document, dict):
            raise SnapshotFormatError("snapshot root must be an object")
        stores: Dict[str, RecordStore] = {}
        for name, model in COLLECTIONS.items():
            raw = document.get(name, {})
            if not isinstance(raw, dict):
                raise SnapshotFormatError(f"collection {name!r} must be an object")
            records: Dict[int, Record] = {}
            for key, value in raw.items():
                try:
                    record = model.model_validate(value)
                except ValidationError as exc:
                    raise SnapshotFormatError(f"invalid record {name}[{key}]: {exc}") from exc
                if str(record.id) != str(key):
                    raise SnapshotFormatError(f"key {key!r} does not match id {record.id} in {name!r}")
                records[record.id] = record
            stores[name] = RecordStore(records)
        return cls(**stores)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Database):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in COLLECTIONS)
