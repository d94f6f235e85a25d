from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, Request, Response

from recordapi.domain.records import Task
from recordapi.services.task_service import TaskNotFoundError, TaskService

router = APIRouter(prefix="/task", tags=["tasks"])


def _get_task_service(request: Request) -> TaskService:
    svc = getattr(getattr(request.app, "state", None), "task_service", None)
    if not svc:
        raise RuntimeError("TaskService not configured")
    return svc


@router.post("", response_model=Task)
def create_task(task: Task, request: Request):
    return _get_task_service(request).create(task)


@router.get("", response_model=List[Task])
def read_all_tasks(request: Request):
    return _get_task_service(request).list()


@router.put("", response_model=Task)
def update_task(task: Task, request: Request):
    return _get_task_service(request).update(task)


@router.get("/{task_id}", response_model=Task)
def read_task(task_id: int, request: Request):
    try:
        return _get_task_service(request).get(task_id)
    except TaskNotFoundError:
        raise HTTPException(404, "Task not found")


@router.delete("/{task_id}")
def delete_task(task_id: int, request: Request):
    _get_task_service(request).delete(task_id)
    return Response(status_code=200)
