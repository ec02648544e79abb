from __future__ import annotations

import pytest

from hostelcare.config.logging import build_logging_config
from hostelcare.config.settings import Settings


@pytest.mark.parametrize(
    "raw",
    ['["http://a.test", "http://b.test"]', "http://a.test, http://b.test"],
    ids=["json", "comma-separated"],
)
def test_cors_origins_parsing(monkeypatch, raw):
    monkeypatch.setenv("CORS_ORIGINS", raw)
    assert Settings().CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_database_url_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_NAME", "hostels")

    url = Settings().get_database_url()

    assert url.startswith("postgresql+psycopg2://")
    assert url.endswith("@db.internal:5432/hostels")


def test_legacy_project_name_is_accepted(monkeypatch):
    monkeypatch.setenv("PROJECT_NAME", "Campus Housing")
    assert Settings().APP_NAME == "Campus Housing"


def test_logging_config_adds_file_handlers_only_when_enabled(monkeypatch, tmp_path):
    from hostelcare.config import logging as logging_config

    config = build_logging_config()
    assert set(config["handlers"]) == {"console"}

    monkeypatch.setattr(logging_config.settings, "LOG_TO_FILE", True)
    monkeypatch.setattr(logging_config.settings, "LOG_DIR", str(tmp_path))
    config = build_logging_config()
    assert set(config["handlers"]) == {"console", "file", "json_file"}
    assert config["handlers"]["json_file"]["formatter"] == "json"


def test_runner_serves_on_configured_host_and_port(monkeypatch):
    import hostelcare.__main__ as runner

    calls = []
    monkeypatch.setattr(runner.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setattr(runner.settings, "HOST", "127.0.0.1")
    monkeypatch.setattr(runner.settings, "PORT", 8081)

    runner.main()

    app, kwargs = calls[0]
    assert app == "hostelcare.main:app"
    assert (kwargs["host"], kwargs["port"]) == ("127.0.0.1", 8081)
