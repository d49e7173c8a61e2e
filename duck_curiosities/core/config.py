"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DUCK_LOG_LEVEL: str = Field(default="info")
    DUCK_LOG_DIR: Path | None = Field(default=None)
    DUCK_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")
    DUCK_LOG_TO_FILE: bool = Field(default=True)

    # Localization
    FALLBACK_LOCALE: str = Field(default="en")
    MESSAGE_CATALOG_PATH: Path | None = Field(default=None)

    # Routing
    FACT_INTENT_NAME: str = Field(default="FrasesIntent")

    # Attached to outbound envelopes for platform-side observability only
    SKILL_USER_AGENT: str = Field(default="sample/hello-world/v1.2")


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
