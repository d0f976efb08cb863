"""Environment-based configuration using pydantic-settings.

Holds the knobs read when an error string is built (stack trace toggle,
frame cap, extra internal module markers) and the logging defaults.

Example:
    >>> from resultkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.errors.add_stack_trace
    False

    # Or with environment variables:
    # RESULTKIT_ERR_ADD_STACK_TRACE=true
    # RESULTKIT_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ErrorSettings(BaseSettings):
    """Error message construction defaults."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_ERR_",
        extra="ignore",
    )

    add_stack_trace: bool = Field(default=False, description="Append filtered stack trace to error strings")
    max_stack_frames: PositiveInt = Field(default=64, description="Max frames captured for a stack trace")
    internal_modules: list[str] = Field(
        default_factory=list,
        description="Extra module markers never reported as the error context",
    )  # env value is JSON: RESULTKIT_ERR_INTERNAL_MODULES='["myapp.helpers"]'


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_captured: bool = Field(default=True, description="Log exceptions captured by try_* combinators")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class ResultkitSettings(BaseSettings):
    """Root settings for resultkit.

    Loads configuration from environment variables with RESULTKIT_ prefix.

    Example environment variables:
        RESULTKIT_DEBUG=true
        RESULTKIT_ERR_ADD_STACK_TRACE=true
        RESULTKIT_ERR_MAX_STACK_FRAMES=16
        RESULTKIT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    errors: ErrorSettings = Field(default_factory=ErrorSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ResultkitSettings:
    """Get the global settings instance (cached)."""
    return ResultkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    The next get_settings() call reloads configuration from environment.
    """
    get_settings.cache_clear()
