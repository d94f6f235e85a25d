"""
Run one of the services under uvicorn.

Usage:
  python -m recordapi tasks [--host 127.0.0.1] [--port 8080] [--data-file database.json]
  python -m recordapi games --data-file games.json
"""
from __future__ import annotations

import argparse
import dataclasses
from typing import Optional, Sequence

import uvicorn

from recordapi.app_factory import APP_FACTORIES
from recordapi.core.config import Settings, get_settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="recordapi", description="JSON-backed record service")
    ap.add_argument("variant", choices=sorted(APP_FACTORIES), help="which service to run")
    ap.add_argument("--host", help="bind address (default: $HOST or 127.0.0.1)")
    ap.add_argument("--port", type=int, help="bind port (default: $PORT or 8080)")
    ap.add_argument("--data-file", help="snapshot file (default: $DATA_FILE or database.json)")
    ap.add_argument("--log-level", help="logging level (default: $LOG_LEVEL or INFO)")
    ap.add_argument(
        "--strict-persistence",
        action="store_true",
        default=None,
        help="answer 500 when a snapshot write fails instead of ignoring it",
    )
    return ap.parse_args(argv)


def settings_from_args(args: argparse.Namespace, base: Optional[Settings] = None) -> Settings:
    settings = base or get_settings()
    overrides = {
        "host": args.host,
        "port": args.port,
        "data_file": args.data_file,
        "log_level": args.log_level.upper() if args.log_level else None,
        "strict_persistence": args.strict_persistence,
    }
    return dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = settings_from_args(args)
    app = APP_FACTORIES[args.variant](settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
