"""
Registration and login.

Passwords are stored and compared as plain text, and usernames are not
unique: login checks only the first user registered under a name.
"""

from __future__ import annotations

import logging

from recordapi.core.guard import StoreGuard
from recordapi.domain.records import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


class AuthError(Exception):
    """Base class for authentication-related exceptions."""


class InvalidCredentialsError(AuthError):
    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


class AuthService:
    def __init__(self, guard: StoreGuard) -> None:
        self.guard = guard

    def register(self, user: User) -> User:
        with self.guard.write() as db:
            db.users.insert(user)
        return user

    def login(self, username: str, password: str) -> User:
        with self.guard.read() as db:
            stored = db.find_user_by_name(username)
        if stored is None or stored.password != password:
            # Same outcome for unknown user and wrong password.
            logger.info("Rejected login for username %r", username)
            raise InvalidCredentialsError()
        return stored
