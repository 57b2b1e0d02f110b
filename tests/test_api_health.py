# Tests for GET /api/health.

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from chat_proxy import __version__
from chat_proxy.api.endpoints.health import router
from chat_proxy.config.settings import get_settings


@pytest.fixture
def test_app():
    app = FastAPI()
    app.include_router(router, prefix="/api")
    return app


@pytest.fixture
def client(test_app):
    return TestClient(test_app)


class TestHealthStatus:
    def test_health_ok(self, test_app, client, settings):
        test_app.dependency_overrides[get_settings] = lambda: settings

        resp = client.get("/api/health")

        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["version"] == __version__
        assert data["environment"] == "local"
        assert data["openai_configured"] is True

    def test_health_reports_missing_key(self, test_app, client, unconfigured_settings):
        test_app.dependency_overrides[get_settings] = lambda: unconfigured_settings

        resp = client.get("/api/health")

        assert resp.status_code == 200
        assert resp.json()["openai_configured"] is False
