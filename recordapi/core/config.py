"""
Configuration helpers for the record service.

Routers/services receive a Settings object instead of reading os.environ
directly. Tests build their own Settings and hand it to the app factories.
"""

from dataclasses import dataclass, field
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_file: str = "database.json"
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    strict_persistence: bool = False
    cors_extra_origins: tuple[str, ...] = field(default_factory=tuple)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _csv(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip().rstrip("/") for item in (value or "").split(",") if item.strip())

    return Settings(
        data_file=os.getenv("DATA_FILE") or "database.json",
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8080"), 8080),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        strict_persistence=_bool(os.getenv("STRICT_PERSISTENCE"), False),
        cors_extra_origins=_csv(os.getenv("CORS_EXTRA_ORIGINS")),
    )
