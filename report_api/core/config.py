# File: report_api/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, Field, field_validator


def _env(name: str, default: str):
    # Read at instantiation time so tests can patch the environment.
    return Field(default_factory=lambda: os.getenv(name, default), validate_default=True)


class Settings(BaseModel):
    # Basic app info
    PROJECT_NAME: str = "Relational Reports API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api"

    # CORS, comma-separated in the environment
    backend_cors_origins: List[str] = _env(
        "BACKEND_CORS_ORIGINS",
        "http://localhost:5173,http://127.0.0.1:5173",
    )

    # Database
    database_url: str = _env("DATABASE_URL", "sqlite:///./reports.db")
    database_echo: bool = _env("DATABASE_ECHO", "false")

    # Logging
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_format: str = _env("LOG_FORMAT", "text")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return str(v).strip().upper() or "INFO"

    @field_validator("log_format", mode="before")
    @classmethod
    def check_log_format(cls, v):
        v = str(v).strip().lower()
        if v not in {"text", "json"}:
            raise ValueError(f"LOG_FORMAT must be 'text' or 'json', got {v!r}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
