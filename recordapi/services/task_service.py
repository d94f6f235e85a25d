"""Task CRUD use cases."""

from __future__ import annotations

from typing import List

from recordapi.core.guard import StoreGuard
from recordapi.domain.errors import RecordNotFoundError
from recordapi.domain.records import RecordId, Task


class TaskNotFoundError(RecordNotFoundError):
    kind = "Task"


class TaskService:
    """Create/read/update/delete tasks. Every mutation is followed by a snapshot."""

    def __init__(self, guard: StoreGuard) -> None:
        self.guard = guard

    def create(self, task: Task) -> Task:
        with self.guard.write() as db:
            db.tasks.insert(task)
        return task

    def get(self, task_id: RecordId) -> Task:
        with self.guard.read() as db:
            task = db.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list(self) -> List[Task]:
        with self.guard.read() as db:
            return db.tasks.get_all()

    def update(self, task: Task) -> Task:
        with self.guard.write() as db:
            db.tasks.update(task)
        return task

    def delete(self, task_id: RecordId) -> None:
        with self.guard.write() as db:
            db.tasks.delete(task_id)
