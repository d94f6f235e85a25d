"""
Single-lock access to the shared Database.

Every read and every write runs under one ``threading.Lock``. ``write()``
also persists the snapshot before releasing the lock, so saves happen in the
same total order as the mutations that triggered them.

Usage::

    with guard.read() as db:
        task = db.tasks.get(7)

    with guard.write() as db:
        db.tasks.insert(task)      # snapshot written on exit, still locked
"""
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from recordapi.repositories.database import Database
from recordapi.repositories.json_storage import JsonSnapshotStorage, SaveResult

logger = logging.getLogger(__name__)


class PersistenceWriteError(Exception):
    """Raised by ``write()`` in strict mode when the snapshot could not be saved."""

    def __init__(self, result: SaveResult):
        super().__init__(f"snapshot write failed: {result.error}")
        self.result = result


class StoreGuard:
    """Owns the Database for the lifetime of an app and serializes every access to it."""

    def __init__(self, database: Database, storage: JsonSnapshotStorage, *, strict_persistence: bool = False) -> None:
        self._db = database
        self._storage = storage
        self._lock = threading.Lock()
        self.strict_persistence = strict_persistence
        # True while the file lags behind memory (last save failed)
        self._unsaved = False

    @classmethod
    def open(cls, storage: JsonSnapshotStorage, *, strict_persistence: bool = False) -> "StoreGuard":
        return cls(storage.load_or_empty(), storage, strict_persistence=strict_persistence)

    @property
    def storage(self) -> JsonSnapshotStorage:
        return self._storage

    @contextmanager
    def read(self) -> Iterator[Database]:
        with self._lock:
            yield self._db

    @contextmanager
    def write(self) -> Iterator[Database]:
        """Yield the database for mutation; on normal exit snapshot it before unlocking.

        If the block raises, nothing is saved. A failed save is logged and
        ignored unless ``strict_persistence`` is set.
        """
        with self._lock:
            yield self._db
            result = self._storage.save(self._db)
            self._unsaved = not result.ok
            if not result.ok and self.strict_persistence:
                raise PersistenceWriteError(result)

    def flush(self) -> SaveResult:
        """Retry the snapshot if the last save failed. A clean guard leaves the file untouched."""
        with self._lock:
            if not self._unsaved:
                return SaveResult(ok=True)
            result = self._storage.save(self._db)
            self._unsaved = not result.ok
        if result.ok:
            logger.info("Flushed snapshot to %s", self._storage.path)
        return result
