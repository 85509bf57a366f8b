"""Test configuration and fixtures."""

import logging

import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import create_app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point LOG_DIR at a temp dir and reset cached settings and root handlers."""
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    get_settings.cache_clear()

    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    yield
    for h in root_logger.handlers[:]:
        if h not in saved_handlers:
            root_logger.removeHandler(h)
            h.close()
    for h in saved_handlers:
        if h not in root_logger.handlers:
            root_logger.addHandler(h)
    root_logger.setLevel(saved_level)
    get_settings.cache_clear()


@pytest.fixture
def client():
    """Create test client (lifespan not entered)."""
    return TestClient(create_app())
