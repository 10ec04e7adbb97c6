"""
Application settings using pydantic-settings for type-safe configuration.

All environment variables are centralized here with typing, validation and
defaults suitable for local development. Settings are loaded once and cached.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

SUPPORTED_PARSERS = ("mock", "openai")
SUPPORTED_ASTROLOGY = ("stub",)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Production values should be set via environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # === Wish parser ===
    ai_provider: str = Field(
        default="mock",
        description="Wish parser provider: 'mock' (local keyword parser) or 'openai'",
    )
    ai_model: str = Field(
        default="gpt-4.1-mini",
        description="Model used by the OpenAI wish parser",
    )
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key (required when AI_PROVIDER=openai)",
    )
    ai_base_url: str | None = Field(
        default=None,
        description="Optional custom OpenAI-compatible base URL",
    )
    ai_timeout: int = Field(
        default=30,
        gt=0,
        description="Wish parser request timeout in seconds",
    )

    # === Astrology ===
    astrology_provider: str = Field(
        default="stub",
        description="Astrology provider used in Vedic mode",
    )

    # === CORS Configuration ===
    # str for env var parsing, converted to a list via property
    allowed_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        alias="ALLOWED_ORIGINS",
        description="Allowed CORS origins (comma-separated)",
    )

    @property
    def allowed_origins(self) -> list[str]:
        """Parse comma-separated origins string into list."""
        return [origin.strip() for origin in self.allowed_origins_str.split(",") if origin.strip()]

    @field_validator("ai_provider", mode="after")
    @classmethod
    def validate_ai_provider(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SUPPORTED_PARSERS:
            raise ValueError(f"Invalid AI_PROVIDER: {v}. Must be one of {', '.join(SUPPORTED_PARSERS)}")
        return v

    @field_validator("astrology_provider", mode="after")
    @classmethod
    def validate_astrology_provider(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in SUPPORTED_ASTROLOGY:
            raise ValueError(f"Invalid ASTROLOGY_PROVIDER: {v}. Must be one of {', '.join(SUPPORTED_ASTROLOGY)}")
        return v

    @model_validator(mode="after")
    def warn_missing_api_key(self) -> Settings:
        """Warn early when the OpenAI parser is selected without a key."""
        if self.ai_provider == "openai" and not self.openai_api_key:
            logger.warning("AI_PROVIDER=openai but OPENAI_API_KEY is not set; wish parsing will fail")
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    """
    return Settings()
