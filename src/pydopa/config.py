"""
Application settings.

Values come from environment variables prefixed with ``PYDOPA_`` (or a local
``.env`` file), e.g. ``PYDOPA_CACHE_DIR=/tmp/dopa``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the DOPA client."""

    model_config = SettingsConfigDict(
        env_prefix="PYDOPA_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "pydopa"
    app_env: str = "development"
    debug: bool = False

    api_base: str = Field(
        default="https://dopa-services.jrc.ec.europa.eu/services",
        description="Root URL of the DOPA REST services",
    )
    cache_dir: Path = Field(default=Path(".cache/pydopa"))
    cache_ttl_hours: float = Field(default=24.0, gt=0)
    http_timeout: float = Field(default=30.0, gt=0)
    http_retries: int = Field(default=4, ge=0)
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
