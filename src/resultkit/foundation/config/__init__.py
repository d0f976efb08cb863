"""Configuration management using pydantic-settings."""

from .settings import (
    ErrorSettings,
    LoggingSettings,
    ResultkitSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ErrorSettings",
    "LoggingSettings",
    "ResultkitSettings",
    "clear_settings_cache",
    "get_settings",
]
