# File: tests/test_config.py

import pytest
from pydantic import ValidationError

from report_api.core.config import Settings


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "DATABASE_ECHO", "BACKEND_CORS_ORIGINS", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.database_url == "sqlite:///./reports.db"
    assert s.database_echo is False
    assert s.backend_cors_origins == ["http://localhost:5173", "http://127.0.0.1:5173"]
    assert s.log_level == "INFO"
    assert s.log_format == "text"
    assert s.api_prefix == "/api"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://reports:secret@db:5432/reports")
    monkeypatch.setenv("DATABASE_ECHO", "true")
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "https://a.example, ,https://b.example")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")

    s = Settings()
    assert s.database_url.startswith("postgresql+psycopg://")
    assert s.database_echo is True
    assert s.backend_cors_origins == ["https://a.example", "https://b.example"]
    assert s.log_level == "DEBUG"
    assert s.log_format == "json"


def test_rejects_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(log_format="xml")
