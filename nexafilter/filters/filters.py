"""
NexaFilter Filters
==================

Built-in value filters.

A filter normalizes a value before validation: ``filter(value) -> value``.
String filters pass non-string values through untouched so that
missing (None) values stay None.
"""

from __future__ import annotations

import html
import re
import unicodedata
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Optional, Pattern


class Filter(ABC):
    """
    Abstract value filter.

    Example:
        class Reverse(Filter):
            def filter(self, value: Any) -> Any:
                return value[::-1] if isinstance(value, str) else value
    """

    @abstractmethod
    def filter(self, value: Any) -> Any:
        """Return the filtered value."""
        ...

    def __call__(self, value: Any) -> Any:
        return self.filter(value)


@dataclass
class StringTrim(Filter):
    """Strip leading and trailing characters (whitespace by default)."""

    charlist: Optional[str] = None

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return value.strip(self.charlist)


@dataclass
class StringToLower(Filter):
    """Lowercase strings."""

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return value.lower()


@dataclass
class StringToUpper(Filter):
    """Uppercase strings."""

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return value.upper()


@dataclass
class StripTags(Filter):
    """Remove HTML tags."""

    _tags: ClassVar[Pattern] = re.compile(r"<[^>]*>")

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return self._tags.sub("", value)


@dataclass
class StripNewlines(Filter):
    """Remove carriage returns and line feeds."""

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return value.replace("\r", "").replace("\n", "")


@dataclass
class HtmlEntities(Filter):
    """Escape HTML special characters."""

    quote: bool = True

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        return html.escape(value, quote=self.quote)


@dataclass
class NormalizeUnicode(Filter):
    """Unicode normalization; strips null bytes and control characters."""

    form: str = "NFKC"
    strip_control_chars: bool = True

    _control: ClassVar[Pattern] = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

    def filter(self, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        if self.strip_control_chars:
            value = self._control.sub("", value)
        return unicodedata.normalize(self.form, value)


@dataclass
class Digits(Filter):
    """Keep only digit characters."""

    def filter(self, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        if not isinstance(value, str):
            return value
        return "".join(ch for ch in value if ch.isdigit())


@dataclass
class ToInt(Filter):
    """Cast numeric strings and floats to int; leave anything else alone."""

    def filter(self, value: Any) -> Any:
        if isinstance(value, bool) or value is None:
            return value
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                try:
                    return int(float(value.strip()))
                except ValueError:
                    return value
        return value


@dataclass
class ToFloat(Filter):
    """Cast numeric strings and ints to float."""

    def filter(self, value: Any) -> Any:
        if isinstance(value, bool) or value is None:
            return value
        if isinstance(value, int):
            return float(value)
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return value
        return value


@dataclass
class ToBool(Filter):
    """Cast boolean-like literals to bool."""

    _true: ClassVar[tuple] = ("true", "yes", "1", "on", "enabled")
    _false: ClassVar[tuple] = ("false", "no", "0", "off", "disabled", "")

    def filter(self, value: Any) -> Any:
        if isinstance(value, bool) or value is None:
            return value
        if isinstance(value, str):
            lower = value.lower().strip()
            if lower in self._true:
                return True
            if lower in self._false:
                return False
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        return value


@dataclass
class ToNull(Filter):
    """Turn empty values into None."""

    def filter(self, value: Any) -> Any:
        if value == "" or value == [] or value == {}:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return value


@dataclass
class Callback(Filter):
    """Filter wrapper for plain callables."""

    func: Callable[[Any], Any]

    def filter(self, value: Any) -> Any:
        return self.func(value)
