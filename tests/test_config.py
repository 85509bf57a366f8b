"""Test settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.core.logging_config import setup_logging


def test_settings_defaults(monkeypatch):
    for name in ("APP_NAME", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)

    assert settings.APP_NAME == "Mani Project"
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8080
    assert settings.CORS_ORIGINS == ""
    assert settings.LOG_LEVEL == "INFO"


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("HOST", "127.0.0.1")

    settings = Settings(_env_file=None)
    assert settings.PORT == 9090
    assert settings.HOST == "127.0.0.1"


def test_invalid_port_rejected(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_setup_logging_creates_log_file(tmp_path):
    log_dir = tmp_path / "custom"
    setup_logging(log_dir=str(log_dir), log_level="debug")
    logging.getLogger("app.test").debug("hello log")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    for h in root_logger.handlers:
        h.flush()
    assert "hello log" in (log_dir / "app.log").read_text(encoding="utf-8")


def test_setup_logging_is_idempotent(tmp_path):
    setup_logging(log_dir=str(tmp_path))
    setup_logging(log_dir=str(tmp_path))

    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert sum(isinstance(h, logging.FileHandler) for h in handlers) == 1


def test_unknown_log_level_falls_back_to_info(tmp_path):
    setup_logging(log_dir=str(tmp_path), log_level="chatty")

    assert logging.getLogger().level == logging.INFO
