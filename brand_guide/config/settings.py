"""
Application settings and configuration management.

This module handles all environment variables, API keys, and application
configuration using Pydantic settings management for type safety and validation.
The resolved Settings object is passed into every pipeline entry point; no other
module reads the process environment.
"""

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from brand_guide.utils.errors import ConfigurationError


DEFAULT_MODEL = "claude-sonnet-4-20250514"
DEFAULT_WEB_FETCH_TIMEOUT_MS = 120_000


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    The API key is optional at load time so that pure operations (sanitizing,
    normalizing, validating setup) work without credentials; anything that calls
    the model goes through require_api_key() first.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # API Keys
    anthropic_api_key: Optional[SecretStr] = Field(default=None, alias="ANTHROPIC_API_KEY")

    # Application Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        alias="LOG_LEVEL"
    )
    log_json: bool = Field(default=False, alias="LOG_JSON")

    # Model Configuration
    extraction_model: str = Field(default=DEFAULT_MODEL, alias="ANTHROPIC_EXTRACTION_MODEL")
    brand_guide_model: str = Field(default=DEFAULT_MODEL, alias="ANTHROPIC_BRANDGUIDE_MODEL")
    max_tokens: int = Field(default=8192, alias="ANTHROPIC_MAX_TOKENS")
    web_fetch_timeout_ms: int = Field(
        default=DEFAULT_WEB_FETCH_TIMEOUT_MS,
        alias="ANTHROPIC_WEB_FETCH_TIMEOUT_MS",
    )

    # Page Fetching
    extraction_text_max_length: int = Field(default=80_000, alias="EXTRACTION_TEXT_MAX_LENGTH")
    page_fetch_timeout_seconds: float = Field(default=30.0, alias="PAGE_FETCH_TIMEOUT_SECONDS")

    @field_validator("web_fetch_timeout_ms", mode="before")
    @classmethod
    def validate_web_fetch_timeout(cls, v: Any) -> int:
        """Fall back to the default for unset, non-numeric or non-positive values."""
        try:
            timeout = int(float(v))
        except (TypeError, ValueError):
            return DEFAULT_WEB_FETCH_TIMEOUT_MS
        return timeout if timeout > 0 else DEFAULT_WEB_FETCH_TIMEOUT_MS

    @field_validator("extraction_text_max_length")
    @classmethod
    def validate_text_max_length(cls, v: int) -> int:
        """Reject non-positive text caps."""
        if v <= 0:
            raise ValueError("EXTRACTION_TEXT_MAX_LENGTH must be a positive integer")
        return v

    @field_validator("anthropic_api_key", mode="before")
    @classmethod
    def blank_key_is_missing(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only key as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def web_fetch_timeout_seconds(self) -> float:
        return self.web_fetch_timeout_ms / 1000

    def require_api_key(self) -> str:
        """
        Return the Anthropic API key or fail before any network activity.

        Raises:
            ConfigurationError: If ANTHROPIC_API_KEY is not set.
        """
        if self.anthropic_api_key is None:
            raise ConfigurationError("ANTHROPIC_API_KEY is not set")
        return self.anthropic_api_key.get_secret_value().strip()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
