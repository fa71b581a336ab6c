"""Configuration management using pydantic-settings."""

from .settings import API_KEY_ENV, DeepLSettings, LoggingSettings, clear_settings_cache, get_settings

__all__ = ["API_KEY_ENV", "DeepLSettings", "LoggingSettings", "clear_settings_cache", "get_settings"]
