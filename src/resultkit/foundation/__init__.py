"""Foundation: settings and logging shared by the result types."""

from .config import (
    ErrorSettings,
    LoggingSettings,
    ResultkitSettings,
    clear_settings_cache,
    get_settings,
)
from .logging import configure_logging, get_logger

__all__ = [
    "ErrorSettings",
    "LoggingSettings",
    "ResultkitSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_logger",
    "get_settings",
]
