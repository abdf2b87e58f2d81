"""Utility helpers shared across the :mod:`fathom` package."""

from __future__ import annotations

from .logging_config import configure_logging, install_null_handler, resolve_level
from .observability import (
    StructuredLoggerAdapter,
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

__all__ = [
    "configure_logging",
    "install_null_handler",
    "resolve_level",
    "StructuredLoggerAdapter",
    "add_span_attributes",
    "create_counter",
    "create_histogram",
    "get_logger",
    "record_exception",
    "start_span",
]
