from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the recordapi package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from recordapi.core.config import Settings  # noqa: E402
from recordapi.app import create_app  # noqa: E402
from recordapi.game_app import create_game_app  # noqa: E402


@pytest.fixture()
def data_file(tmp_path) -> Path:
    return tmp_path / "database.json"


@pytest.fixture()
def settings(data_file) -> Settings:
    return Settings(data_file=str(data_file))


@pytest.fixture()
def task_client(settings):
    """TestClient for the task service; the context manager runs startup/shutdown."""
    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture()
def game_client(settings):
    with TestClient(create_game_app(settings)) as client:
        yield client
