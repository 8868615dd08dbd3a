from __future__ import annotations

from calctools.app import create_app
from calctools.config import Settings


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("CALCTOOLS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("CALCTOOLS_PORT", "8080")

    settings = Settings()

    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.PORT == 8080


def test_api_prefix_is_configurable():
    app = create_app(Settings(API_PREFIX="/v2", LOG_LEVEL="WARNING"))

    with app.test_client() as client:
        assert client.get("/v2/tools").status_code == 200
        assert client.get("/api/tools").status_code == 404


def test_cors_header_for_dev_origin(client):
    resp = client.get("/api/tools", headers={"Origin": "http://localhost:5173"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"
