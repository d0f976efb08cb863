"""Named stdlib loggers under the ``resultkit`` namespace.

The library never configures handlers on its own beyond a NullHandler;
applications opt in with configure_logging() or their own logging setup.

Example:
    >>> from resultkit.foundation.logging import configure_logging, get_logger
    >>> configure_logging("DEBUG")
    >>> log = get_logger("monads")
    >>> log.name
    'resultkit.monads'
"""

from __future__ import annotations

import logging

from resultkit.foundation.config import get_settings

ROOT_LOGGER = "resultkit"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str = "") -> logging.Logger:
    """Get a logger below the resultkit namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Apply the configured (or given) level to the resultkit root logger.

    Args:
        level: Level name or number; defaults to RESULTKIT_LOG_LEVEL.

    Returns:
        The resultkit root logger.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level if level is not None else get_settings().logging.level)
    return root


def log_captured(log: logging.Logger, label: str, exc: BaseException) -> None:
    """Record an exception turned into an Err by a guarded combinator."""
    if get_settings().logging.log_captured:
        log.debug("captured %s in %s: %s", type(exc).__name__, label, exc)
