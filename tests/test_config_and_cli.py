from __future__ import annotations

import logging

import pytest
from fastapi import FastAPI

import recordapi.__main__ as cli
from recordapi.core import config as core_config
from recordapi.core.config import Settings


@pytest.fixture()
def root_level():
    root = logging.getLogger()
    saved = root.level
    yield root
    root.setLevel(saved)


@pytest.fixture()
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()


def test_settings_from_environment(monkeypatch, fresh_settings):
    monkeypatch.setenv("DATA_FILE", "/srv/records.json")
    monkeypatch.setenv("PORT", "not-a-number")
    monkeypatch.setenv("STRICT_PERSISTENCE", "yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_EXTRA_ORIGINS", "https://a.example/, https://b.example")

    settings = core_config.get_settings()

    assert settings.data_file == "/srv/records.json"
    assert settings.port == 8080
    assert settings.strict_persistence is True
    assert settings.log_level == "DEBUG"
    assert settings.cors_extra_origins == ("https://a.example", "https://b.example")


def test_settings_defaults(monkeypatch, fresh_settings):
    for name in ("DATA_FILE", "HOST", "PORT", "LOG_LEVEL", "STRICT_PERSISTENCE", "CORS_EXTRA_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    assert core_config.get_settings() == Settings()


def test_cli_overrides_only_given_flags():
    args = cli.parse_args(["tasks", "--port", "9000", "--data-file", "x.json"])
    settings = cli.settings_from_args(args, base=Settings(host="0.0.0.0", strict_persistence=True))

    assert args.variant == "tasks"
    assert settings.port == 9000
    assert settings.data_file == "x.json"
    assert settings.host == "0.0.0.0"
    assert settings.strict_persistence is True


def test_cli_rejects_unknown_variant():
    with pytest.raises(SystemExit):
        cli.parse_args(["chess"])


def test_main_runs_selected_app_under_uvicorn(monkeypatch, tmp_path, fresh_settings, root_level):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    cli.main(["games", "--port", "9100", "--data-file", str(tmp_path / "g.json"), "--log-level", "warning"])

    assert isinstance(calls["app"], FastAPI)
    assert calls["app"].state.settings.data_file == str(tmp_path / "g.json")
    assert calls["port"] == 9100
    assert calls["log_level"] == "warning"
    assert "/start" in calls["app"].openapi()["paths"]
    assert root_level.level == logging.WARNING
