import logging

from tests.conftest import json_transport
from app.core.config import Settings
from app.core.logging import configure_logging


def test_settings_defaults(monkeypatch):
    for name in ("CATALOG_URL", "PORT", "HOST", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.CATALOG_URL == "https://dummyjson.com/products"
    assert settings.DEBUG is False


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_URL", "http://localhost:9000/products")
    monkeypatch.setenv("PORT", "9090")
    settings = Settings(_env_file=None)

    assert settings.CATALOG_URL == "http://localhost:9000/products"
    assert settings.PORT == 9090


def test_health_reports_ok(client_for):
    client = client_for(json_transport({"products": []}))
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["checks"]["templates"] == "ok"
    assert "catalog_url" in body["checks"]


def test_startup_logs_listening_address(caplog):
    from fastapi.testclient import TestClient
    from app.main import app

    with caplog.at_level(logging.INFO, logger="app.core.lifespan"):
        with TestClient(app):
            pass

    messages = [r.getMessage() for r in caplog.records if r.name == "app.core.lifespan"]
    assert "Server running at http://localhost:8080" in messages
    assert "Server stopped" in messages


def test_run_serves_on_configured_port(monkeypatch):
    from app import main

    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    main.run()

    assert calls == [(main.app, {"host": main.settings.HOST, "port": 8080, "log_config": None})]


def test_configure_logging_quiets_http_libs():
    configure_logging(logging.DEBUG)
    try:
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
        assert logging.getLogger("uvicorn.access").propagate is True
    finally:
        configure_logging(logging.INFO)


def test_git_sha_resolves_head_once(monkeypatch):
    from app.api.v1.routers import health

    commands = []

    def fake_check_output(cmd, **kwargs):
        commands.append(cmd)
        return b"abc1234\n"

    monkeypatch.setattr(health.subprocess, "check_output", fake_check_output)
    health._git_sha.cache_clear()
    try:
        assert health._git_sha() == "abc1234"
        assert health._git_sha() == "abc1234"
    finally:
        health._git_sha.cache_clear()

    assert commands == [["git", "rev-parse", "--short", "HEAD"]]
