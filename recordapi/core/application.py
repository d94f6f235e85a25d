"""
Shared FastAPI bootstrap for the task and game services.

The StoreGuard lives for exactly one app lifespan: it is opened from the
snapshot file at startup, handed to the services through ``app.state`` and
flushed at shutdown when the last save had failed.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Callable, Iterable, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from recordapi.core.config import Settings, get_settings
from recordapi.core.cors import install_cors
from recordapi.core.guard import PersistenceWriteError, StoreGuard
from recordapi.core.logging_config import setup_logging
from recordapi.repositories.json_storage import JsonSnapshotStorage

logger = logging.getLogger(__name__)

ServiceBinder = Callable[[FastAPI, StoreGuard], None]


def build_app(
    title: str,
    routers: Iterable[APIRouter],
    bind_services: ServiceBinder,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        storage = JsonSnapshotStorage(settings.data_file)
        guard = StoreGuard.open(storage, strict_persistence=settings.strict_persistence)
        app.state.guard = guard
        bind_services(app, guard)
        try:
            yield
        finally:
            result = guard.flush()
            if not result.ok:
                logger.error("Final snapshot flush to %s failed: %s", storage.path, result.error)

    app = FastAPI(title=title, lifespan=lifespan)
    app.state.settings = settings
    install_cors(app, settings)

    @app.exception_handler(PersistenceWriteError)
    async def persistence_write_failed(request: Request, exc: PersistenceWriteError):
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse({"detail": "Snapshot write failed"}, status_code=500)

    for router in routers:
        app.include_router(router)
    return app
