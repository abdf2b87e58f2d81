"""Logging setup for fathom and for applications that embed it."""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "FATHOM_LOG_LEVEL"
LOG_FORMAT_ENV = "FATHOM_LOG_FORMAT"
PACKAGE_LOGGER = "fathom"

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False


def install_null_handler() -> logging.Logger:
    """Keep fathom quiet until the embedding application configures logging."""

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())
    return package_logger


def resolve_level(level: str | int | None) -> int:
    """Map a level name or number to a ``logging`` level, ``INFO`` when unknown."""

    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    text = str(level).strip()
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Optional[str | int] = None, *, force: bool = False) -> int:
    """Install a root handler and set the ``fathom`` logger level.

    ``level`` falls back to ``FATHOM_LOG_LEVEL``; the record format can be
    replaced through ``FATHOM_LOG_FORMAT``. Repeated calls are no-ops unless
    ``force`` is set. Returns the level applied to the package logger.
    """

    global _CONFIGURED

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _CONFIGURED and not force:
        return package_logger.level

    resolved_level = resolve_level(level if level is not None else os.environ.get(LOG_LEVEL_ENV))
    log_format = os.environ.get(LOG_FORMAT_ENV) or _DEFAULT_FORMAT

    logging.basicConfig(level=resolved_level, format=log_format, force=force)
    package_logger.setLevel(resolved_level)
    _CONFIGURED = True
    return resolved_level


__all__ = [
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "configure_logging",
    "install_null_handler",
    "resolve_level",
]
