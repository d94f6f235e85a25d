"""
Record types stored by the service and exchanged over HTTP.

Records are frozen pydantic models: the same class validates request bodies,
renders responses and describes the JSON snapshot layout. Changing a record
means building a new one (``model_copy(update=...)``) and upserting it.

Fields use the strict pydantic types: a JSON string is never accepted where
an integer or boolean is expected, neither in request bodies nor in a
snapshot file.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

MAX_RECORD_ID = 2**64 - 1
MAX_INCORRECT_ATTEMPTS = 255

RecordId = int
Letter = Annotated[StrictStr, Field(min_length=1, max_length=1)]


class Record(BaseModel):
    """Base for everything kept in a RecordStore: an immutable value keyed by ``id``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: StrictInt = Field(ge=0, le=MAX_RECORD_ID)


class Task(Record):
    name: StrictStr
    completed: StrictBool


class User(Record):
    username: StrictStr
    password: StrictStr


class GameState(Record):
    word: StrictStr
    guessed_letters: tuple[Letter, ...] = ()
    incorrect_attempts: StrictInt = Field(default=0, ge=0, le=MAX_INCORRECT_ATTEMPTS)
    last_move: StrictStr = ""

    def with_guess(self, letter: str) -> "GameState":
        attempts = self.incorrect_attempts
        if letter not in self.word:
            attempts = min(attempts + 1, MAX_INCORRECT_ATTEMPTS)
        return self.model_copy(
            update={
                "guessed_letters": self.guessed_letters + (letter,),
                "incorrect_attempts": attempts,
                "last_move": f"Guessed letter: {letter}",
            }
        )


class LoginRequest(BaseModel):
    """Login body. Clients historically post a full User, so ``id`` is accepted and ignored."""

    id: Optional[StrictInt] = None
    username: StrictStr
    password: StrictStr
