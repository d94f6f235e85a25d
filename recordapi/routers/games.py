from __future__ import annotations

from fastapi import APIRouter, Body, HTTPException, Request

from recordapi.domain.records import GameState
from recordapi.services.game_service import GameNotFoundError, GameService

router = APIRouter(tags=["games"])


def _get_game_service(request: Request) -> GameService:
    svc = getattr(getattr(request.app, "state", None), "game_service", None)
    if not svc:
        raise RuntimeError("GameService not configured")
    return svc


@router.post("/start", response_model=GameState)
def start_game(request: Request, word: str = Body(...)):
    return _get_game_service(request).start_game(word)


@router.post("/move/{game_id}", response_model=GameState)
def make_move(game_id: int, request: Request, letter: str = Body(..., min_length=1, max_length=1)):
    try:
        return _get_game_service(request).make_move(game_id, letter)
    except GameNotFoundError:
        raise HTTPException(404, "Game not found")
