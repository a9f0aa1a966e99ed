"""
NexaFilter Logger
=================

Structured logging with pluggable handlers.

Levels and output format default to the ``logging.*`` configuration
keys, so ``NEXAFILTER_LOGGING__LEVEL=DEBUG`` turns on the core's
data-distribution and validation traces.
"""

from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Dict, List, Optional, Union

import orjson


class LogLevel(IntEnum):
    """Log levels."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def parse(cls, value: Union[str, int, "LogLevel"]) -> "LogLevel":
        """Parse level from name or number."""
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                return cls.WARNING
        return cls(int(value))


@dataclass
class LogRecord:
    """
    Structured log record.

    Attributes:
        level: Log level
        message: Log message
        timestamp: Record timestamp
        context: Additional context
        exception: Exception info
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    context: Dict[str, Any] = field(default_factory=dict)
    exception: Optional[BaseException] = None
    logger_name: str = "nexafilter"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        data: Dict[str, Any] = {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.name,
            "message": self.message,
            "logger": self.logger_name,
        }

        if self.context:
            data["context"] = self.context

        if self.exception:
            data["exception"] = {
                "type": type(self.exception).__name__,
                "message": str(self.exception),
                "traceback": traceback.format_exception(
                    type(self.exception),
                    self.exception,
                    self.exception.__traceback__,
                ),
            }

        return data

    def to_json(self, pretty: bool = False) -> str:
        """Convert to JSON string."""
        option = orjson.OPT_INDENT_2 if pretty else 0
        return orjson.dumps(self.to_dict(), default=str, option=option).decode("utf-8")


class LogFormatter:
    """Base log formatter."""

    def format(self, record: LogRecord) -> str:
        """Format log record."""
        raise NotImplementedError


class TextFormatter(LogFormatter):
    """
    Plain text formatter.

    Example output:
        2024-01-15 10:30:45 [DEBUG] Validation finished valid=False invalid=['email']
    """

    COLORS = {
        LogLevel.DEBUG: "\033[36m",
        LogLevel.INFO: "\033[32m",
        LogLevel.WARNING: "\033[33m",
        LogLevel.ERROR: "\033[31m",
        LogLevel.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        format_string: Optional[str] = None,
        date_format: str = "%Y-%m-%d %H:%M:%S",
        colors: bool = True,
        stream: Any = None,
    ):
        self.format_string = format_string or "{timestamp} [{level}] {logger}: {message}"
        self.date_format = date_format
        stream = stream or sys.stderr
        self.colors = colors and hasattr(stream, "isatty") and stream.isatty()

    def format(self, record: LogRecord) -> str:
        """Format as text."""
        level = record.level.name
        if self.colors:
            level = f"{self.COLORS.get(record.level, '')}{level}{self.RESET}"

        message = record.message
        if record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            message = f"{message} {context_str}"

        output = self.format_string.format(
            timestamp=record.timestamp.strftime(self.date_format),
            level=level,
            message=message,
            logger=record.logger_name,
        )

        if record.exception:
            output += "\n" + "".join(
                traceback.format_exception(
                    type(record.exception),
                    record.exception,
                    record.exception.__traceback__,
                )
            )

        return output


class JsonFormatter(LogFormatter):
    """
    JSON formatter for structured logging.

    Example output:
        {"timestamp":"2024-01-15T10:30:45","level":"DEBUG","message":"Data distributed"}
    """

    def __init__(self, pretty: bool = False):
        self.pretty = pretty

    def format(self, record: LogRecord) -> str:
        """Format as JSON."""
        return record.to_json(pretty=self.pretty)


class LogHandler:
    """Base log handler."""

    def __init__(
        self,
        formatter: Optional[LogFormatter] = None,
        level: LogLevel = LogLevel.DEBUG,
    ):
        self.formatter = formatter or TextFormatter()
        self.level = level

    def handle(self, record: LogRecord) -> None:
        """Handle log record."""
        if record.level >= self.level:
            self.emit(record)

    def emit(self, record: LogRecord) -> None:
        """Emit formatted record."""
        raise NotImplementedError


class StreamHandler(LogHandler):
    """Stream output handler."""

    def __init__(
        self,
        stream: Any = None,
        formatter: Optional[LogFormatter] = None,
        level: LogLevel = LogLevel.DEBUG,
    ):
        super().__init__(formatter, level)
        self.stream = stream or sys.stderr

    def emit(self, record: LogRecord) -> None:
        """Write to stream."""
        self.stream.write(self.formatter.format(record) + "\n")
        self.stream.flush()


class Logger:
    """
    Structured logger.

    Example:
        logger = get_logger("nexafilter.core")

        logger.debug("Data distributed", inputs=3)

        # With context
        logger = logger.with_context(filter="SignupFilter")
        logger.debug("Validation started")
    """

    def __init__(
        self,
        name: str = "nexafilter",
        level: LogLevel = LogLevel.WARNING,
        handlers: Optional[List[LogHandler]] = None,
    ):
        self.name = name
        self.level = level
        self._handlers = handlers if handlers is not None else []
        self._context: Dict[str, Any] = {}

    @property
    def handlers(self) -> List[LogHandler]:
        return list(self._handlers)

    def add_handler(self, handler: LogHandler) -> "Logger":
        """Add log handler."""
        self._handlers.append(handler)
        return self

    def remove_handler(self, handler: LogHandler) -> "Logger":
        """Remove log handler."""
        self._handlers.remove(handler)
        return self

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def with_context(self, **context: Any) -> "Logger":
        """
        Create logger with additional context.

        The new logger shares handlers with this one.
        """
        new_logger = Logger(name=self.name, level=self.level, handlers=self._handlers)
        new_logger._context = {**self._context, **context}
        return new_logger

    def _log(
        self,
        level: LogLevel,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        if level < self.level:
            return

        record = LogRecord(
            level=level,
            message=message,
            context={**self._context, **context},
            exception=exception,
            logger_name=self.name,
        )

        for handler in self._handlers:
            try:
                handler.handle(record)
            except Exception:
                pass  # Logging must never break validation

    def debug(self, message: str, **context: Any) -> None:
        self._log(LogLevel.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(LogLevel.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(LogLevel.WARNING, message, **context)

    def error(
        self,
        message: str,
        exception: Optional[BaseException] = None,
        **context: Any,
    ) -> None:
        self._log(LogLevel.ERROR, message, exception, **context)

    def exception(self, message: str, **context: Any) -> None:
        """Log current exception."""
        self._log(LogLevel.ERROR, message, sys.exc_info()[1], **context)


# Global logger registry
_loggers: Dict[str, Logger] = {}


def _default_formatter() -> LogFormatter:
    from nexafilter.core.config import get_config

    settings = get_config()
    if settings.get("logging.format", "text") == "json":
        return JsonFormatter()
    return TextFormatter(colors=settings.get_bool("logging.colors", True))


def get_logger(
    name: str = "nexafilter",
    level: Optional[LogLevel] = None,
) -> Logger:
    """
    Get or create logger.

    Args:
        name: Logger name
        level: Log level, defaults to ``logging.level`` from config

    Returns:
        Logger instance
    """
    if name not in _loggers:
        if level is None:
            from nexafilter.core.config import get_config

            level = LogLevel.parse(get_config().get("logging.level", "WARNING"))
        logger = Logger(name=name, level=level)
        logger.add_handler(StreamHandler(formatter=_default_formatter()))
        _loggers[name] = logger
    elif level is not None:
        _loggers[name].level = level

    return _loggers[name]


def configure_logging(
    level: Union[LogLevel, str] = LogLevel.INFO,
    format: str = "text",
    stream: Any = None,
    colors: bool = True,
) -> Logger:
    """
    Configure every NexaFilter logger.

    Args:
        level: Log level
        format: Output format ("text" or "json")
        stream: Output stream, stderr by default
        colors: Enable colored output

    Returns:
        The root "nexafilter" logger
    """
    level = LogLevel.parse(level)
    if format == "json":
        formatter: LogFormatter = JsonFormatter()
    else:
        formatter = TextFormatter(colors=colors, stream=stream)

    for name in set(_loggers) | {"nexafilter"}:
        logger = _loggers.get(name) or Logger(name=name)
        logger.level = level
        logger._handlers[:] = [StreamHandler(stream=stream, formatter=formatter, level=level)]
        _loggers[name] = logger

    return _loggers["nexafilter"]


def reset_loggers() -> None:
    """Forget all created loggers."""
    _loggers.clear()
