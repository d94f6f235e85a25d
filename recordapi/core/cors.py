"""Cross-origin policy applied to both services."""

from __future__ import annotations

import re

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recordapi.core.config import Settings

# Any http://localhost[:port][/...] origin, or the literal "null" sent by file:// pages.
LOCAL_ORIGIN_REGEX = r"http://localhost.*|null"
ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]
ALLOWED_HEADERS = ["Authorization", "Accept", "Content-Type"]
MAX_AGE_SECONDS = 3600


def install_cors(app: FastAPI, settings: Settings) -> None:
    origin_regex = LOCAL_ORIGIN_REGEX
    if settings.cors_extra_origins:
        extra = "|".join(re.escape(origin) for origin in settings.cors_extra_origins)
        origin_regex = f"{origin_regex}|{extra}"
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=origin_regex,
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
        max_age=MAX_AGE_SECONDS,
    )
