"""Word-guessing game use cases (start a game, guess a letter)."""

from __future__ import annotations

import secrets

from recordapi.core.guard import StoreGuard
from recordapi.domain.records import GameState, RecordId
from recordapi.domain.errors import RecordNotFoundError


class GameNotFoundError(RecordNotFoundError):
    kind = "Game"


def new_game_id() -> RecordId:
    return secrets.randbits(64)


class GameService:
    def __init__(self, guard: StoreGuard) -> None:
        self.guard = guard

    def start_game(self, word: str) -> GameState:
        game = GameState(id=new_game_id(), word=word)
        with self.guard.write() as db:
            db.games.insert(game)
        return game

    def make_move(self, game_id: RecordId, letter: str) -> GameState:
        """Record a guess. Unknown ids raise before anything is written."""
        with self.guard.write() as db:
            game = db.games.get(game_id)
            if game is None:
                raise GameNotFoundError(game_id)
            game = game.with_guess(letter)
            db.games.update(game)
        return game
