"""Settings — tests for environment-driven configuration."""

import pytest
from pydantic import ValidationError

from app.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SEED_DATA", raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    settings = Settings(_env_file=None)
    assert settings.seed_data is True
    assert settings.log_format == "json"
    assert settings.port == 5000


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEED_DATA", "false")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.seed_data is False
    assert settings.log_format == "text"


def test_rejects_unknown_log_format(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
