"""
Tests for web/app.py and main_fx_chart_web_server.py.

Tests the FastAPI application setup and its top-level endpoints.
"""

from unittest.mock import patch

import pytest

import web.app as web_app
from main_fx_chart_web_server import app


class TestWebServerApp:
    """Test the FastAPI application."""

    def test_app_creation(self):
        assert app is web_app.app
        assert app.title == "FX Chart Analyzer API"

    def test_cors_middleware(self):
        """Test that CORS middleware is configured."""
        assert any("CORSMiddleware" in str(getattr(m, "cls", "")) for m in app.user_middleware)

    def test_api_routes_mounted(self):
        routes = [route.path for route in app.routes]

        for path in ["/api/analyze", "/api/currency-pairs", "/api/timeframes", "/api/live-chart", "/health", "/"]:
            assert path in routes, f"Route {path} should be mounted"


class TestWebServerEndpoints:
    """Test individual endpoints."""

    @pytest.mark.parametrize("api_key, mode", [(None, "demo"), ("test-key", "gemini")])
    def test_health_endpoint(self, client, api_key, mode):
        with patch("config.config_api.GEMINI_API_KEY", api_key):
            response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["mode"] == mode
        assert "frontend_dist_exists" in data

    def test_root_without_frontend(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr(web_app, "FRONTEND_DIST_DIR", tmp_path / "missing")

        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "FX Chart Analyzer API"
        assert "Frontend not built" in data["note"]

    def test_root_with_frontend(self, client, tmp_path, monkeypatch):
        (tmp_path / "index.html").write_text("<html><body>chart analyzer</body></html>")
        monkeypatch.setattr(web_app, "FRONTEND_DIST_DIR", tmp_path)

        response = client.get("/")

        assert response.status_code == 200
        assert "chart analyzer" in response.text


class TestWebServerEntryPoint:
    """Test the uvicorn entry point module."""

    def test_module_imports(self):
        import importlib

        for module_name in ["fastapi", "uvicorn", "fastapi.middleware.cors", "fastapi.staticfiles"]:
            importlib.import_module(module_name)
