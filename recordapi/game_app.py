"""Game service: start a word-guessing game and make moves."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from recordapi.core.application import build_app
from recordapi.core.config import Settings
from recordapi.core.guard import StoreGuard
from recordapi.routers import games as games_router
from recordapi.services.game_service import GameService


def _bind_services(app: FastAPI, guard: StoreGuard) -> None:
    app.state.game_service = GameService(guard)


def create_game_app(settings: Optional[Settings] = None) -> FastAPI:
    return build_app("Record API - games", [games_router.router], _bind_services, settings)


app = create_game_app()
