"""Task service: task CRUD plus register/login."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from recordapi.core.application import build_app
from recordapi.core.config import Settings
from recordapi.core.guard import StoreGuard
from recordapi.routers import auth as auth_router
from recordapi.routers import tasks as tasks_router
from recordapi.services.auth_service import AuthService
from recordapi.services.task_service import TaskService


def _bind_services(app: FastAPI, guard: StoreGuard) -> None:
    app.state.task_service = TaskService(guard)
    app.state.auth_service = AuthService(guard)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Factory usable by uvicorn (``--factory``) and by tests."""
    return build_app(
        "Record API - tasks",
        [tasks_router.router, auth_router.router],
        _bind_services,
        settings,
    )


app = create_app()
