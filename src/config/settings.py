"""Environment configuration and validation.

This module defines strongly-typed application settings loaded from environment variables
(optionally via a local `.env` file).
"""

from __future__ import annotations

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.intent.profiles import PROFILES
from src.sql.builder import MAX_SEARCH_LIMIT


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    telegram_bot_token: str = Field(alias="TELEGRAM_BOT_TOKEN")
    database_url: str = Field(alias="DATABASE_URL")

    default_language: str = Field(default="en-US", alias="DEFAULT_LANGUAGE")
    dispatch_timeout_s: float = Field(default=10.0, gt=0, alias="DISPATCH_TIMEOUT_S")
    search_limit: int = Field(default=5, ge=1, le=MAX_SEARCH_LIMIT, alias="SEARCH_LIMIT")

    @field_validator("default_language")
    @classmethod
    def validate_default_language(cls, value: str) -> str:
        """Validate that the fallback language tag names a registered language.

        Users without a language code on their account are interpreted in this language.
        """

        value = value.strip()
        if value[:2].lower() not in PROFILES:
            supported = ", ".join(sorted(PROFILES))
            raise ValueError(f"DEFAULT_LANGUAGE must start with one of: {supported}")
        return value


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is missing or invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
