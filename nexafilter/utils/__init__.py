"""
NexaFilter Utils Package
========================

Structured logging.
"""

from __future__ import annotations

from nexafilter.utils.logger import (
    JsonFormatter,
    Logger,
    LogLevel,
    LogRecord,
    StreamHandler,
    TextFormatter,
    configure_logging,
    get_logger,
)

__all__ = [
    "JsonFormatter",
    "Logger",
    "LogLevel",
    "LogRecord",
    "StreamHandler",
    "TextFormatter",
    "configure_logging",
    "get_logger",
]
