"""
DayBoard settings.

Values come from environment variables prefixed with ``DAYBOARD_`` or from a
local ``.env`` file.

Environment Variables:
    DAYBOARD_DATABASE_URL     SQLAlchemy async URL (default: local SQLite file)
    DAYBOARD_ECHO_SQL         Log every SQL statement
    DAYBOARD_HOST / _PORT     Bind address of the HTTP server
    DAYBOARD_LOG_LEVEL        Root log level
    DAYBOARD_TOKEN_TTL_HOURS  Lifetime of issued bearer tokens
    DAYBOARD_PASSWORD_HASH_ITERATIONS  PBKDF2 work factor
    DAYBOARD_CORS_ORIGINS     JSON list of allowed origins
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DAYBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database_url: str = Field(default="sqlite+aiosqlite:///./dayboard.db")
    echo_sql: bool = False

    host: str = "127.0.0.1"
    port: int = Field(default=5000, ge=1, le=65535)
    log_level: str = "INFO"

    token_ttl_hours: int = Field(default=168, ge=1)
    password_hash_iterations: int = Field(default=260_000, ge=1)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Get the cached process-wide settings."""
    return Settings()
