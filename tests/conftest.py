"""Shared pytest fixtures."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from guestportal.app import App
from guestportal.config import Config


INDEX_HTML = "<html><head><title>%VITE_PAGE_TITLE%</title></head><body><form id=\"login-form\"></form></body></html>"
SUCCESS_HTML = "<html><head><title>%VITE_PAGE_TITLE%</title></head><body><p>You are online</p></body></html>"


@pytest.fixture
def frontend_dir(tmp_path):
    """Create a built frontend directory with both pages and one asset."""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text(INDEX_HTML)
    (dist / "success.html").write_text(SUCCESS_HTML)
    (dist / "assets" / "app.js").write_text("console.log('portal');")
    (tmp_path / "secret.txt").write_text("outside the frontend directory")
    return dist


@pytest.fixture
def config(frontend_dir):
    """Create a config pointing at a test controller and the test frontend."""
    return Config(
        database_url="mongodb://localhost:27017/guestportal-test",
        controller_url="https://unifi.example.com",
        controller_site="lobby",
        controller_username="portal",
        controller_password="secret",
        guest_duration=480,
        frontend_path=str(frontend_dir),
        page_title="Test Wi-Fi",
        pending_max_age=3600,
        pending_purge_interval=30,
    )


@pytest.fixture
def core_stub(config):
    """Minimal stand-in for Core, enough for services that only read config."""
    return SimpleNamespace(config=config)


@pytest.fixture
def app(config):
    """Create an App whose controller and audit collaborators are mocked."""
    app = App(config)
    services = app._core.services
    services.controller.authorize_guest = AsyncMock()
    services.audit.record = AsyncMock()
    services.audit.on_start = AsyncMock()
    app._core.mongo_client = MagicMock(aclose=AsyncMock())
    return app
