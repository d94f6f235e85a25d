"""
JSON snapshot persistence.

The whole database is written to a single file after every mutation and read
back once at startup. There is no journal: a snapshot is always the complete
state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import json
import logging
import os

from recordapi.repositories.database import Database, SnapshotFormatError

logger = logging.getLogger(__name__)


class SnapshotLoadError(Exception):
    """The snapshot file is missing, unreadable or malformed."""

    def __init__(self, message: str, *, missing: bool = False):
        super().__init__(message)
        self.missing = missing


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[Exception] = None


class JsonSnapshotStorage:
    """Reads and writes one well-known snapshot file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _tmp_path(self) -> Path:
        return self.path.with_name(self.path.name + ".tmp")

    def save(self, db: Database) -> SaveResult:
        """Replace the snapshot with the current state. Failures are returned, not raised."""
        tmp = self._tmp_path()
        try:
            payload = json.dumps(db.to_document(), ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self.path)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Snapshot write to %s failed: %s", self.path, exc)
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                pass
            return SaveResult(ok=False, error=exc)
        return SaveResult(ok=True)

    def load(self) -> Database:
        if not self.path.exists():
            raise SnapshotLoadError(f"{self.path} does not exist", missing=True)
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SnapshotLoadError(f"cannot read {self.path}: {exc}") from exc
        try:
            return Database.from_document(document)
        except SnapshotFormatError as exc:
            raise SnapshotLoadError(f"malformed snapshot {self.path}: {exc}") from exc

    def load_or_empty(self) -> Database:
        """Startup helper: a broken or absent snapshot yields an empty database, never a partial one."""
        try:
            db = self.load()
        except SnapshotLoadError as exc:
            if exc.missing:
                logger.info("No snapshot at %s; starting empty", self.path)
            else:
                logger.warning("Ignoring snapshot: %s; starting empty", exc)
            return Database()
        logger.info(
            "Loaded snapshot %s (%d tasks, %d users, %d games)",
            self.path,
            len(db.tasks),
            len(db.users),
            len(db.games),
        )
        return db
