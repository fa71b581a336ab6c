"""Environment-based configuration using pydantic-settings.

The DeepL credential is read once at startup and handed to the client by
constructor injection. It is held as a SecretStr so it never shows up in
reprs or logs.

Example:
    >>> from deepl_mcp.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.base_url
    'https://api-free.deepl.com'

    # Environment variables:
    # DEEPL_API_KEY=xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx:fx
    # DEEPL_BASE_URL=https://api.deepl.com
    # DEEPL_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveFloat, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

API_KEY_ENV = "DEEPL_API_KEY"


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DEEPL_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _lower_format(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v


class DeepLSettings(BaseSettings):
    """Root settings for the server.

    Loads configuration from environment variables with the DEEPL_ prefix and
    from a `.env` file when present.
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEPL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    api_key: SecretStr = Field(..., description="DeepL authentication key")
    base_url: str = Field(default="https://api-free.deepl.com", description="DeepL API base URL")
    auth_scheme: str = Field(default="DeepL-Auth-Key", description="Authorization header scheme")
    timeout: PositiveFloat | None = Field(default=None, description="Request timeout; httpx default when unset")

    server_name: str = "deepl-mcp-server"
    server_version: str = "0.1.0"

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("api_key")
    @classmethod
    def _require_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value().strip():
            raise ValueError(f"{API_KEY_ENV} must not be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def _strip_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @computed_field
    @property
    def authorization(self) -> SecretStr:
        """Value of the Authorization header."""
        return SecretStr(f"{self.auth_scheme} {self.api_key.get_secret_value()}")


@lru_cache(maxsize=1)
def get_settings() -> DeepLSettings:
    """Get the global settings instance (cached).

    Raises:
        pydantic.ValidationError: DEEPL_API_KEY is missing or empty
    """
    return DeepLSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
