"""
NexaFilter Validation Rules
===========================

Collection of built-in validators.

Each rule implements the Rule interface and can be attached to an
input's validator chain. A rule receives the (filtered) value and the
validation context, which is usually the mapping of all raw values of
the enclosing input filter.
"""

from __future__ import annotations

import re
import uuid as uuid_module
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, ClassVar, List, Optional, Pattern, Union

import orjson


def is_empty_value(value: Any) -> bool:
    """Empty means None, an empty string or an empty list."""
    return value is None or value == "" or value == []


class Rule(ABC):
    """
    Abstract validation rule.

    Implement `validate` to create custom rules.

    Example:
        @dataclass
        class IsPositive(Rule):
            message: str = "The input must be positive"

            def validate(self, value: Any, context: Any = None) -> bool:
                return isinstance(value, (int, float)) and value > 0
    """

    message: str = "The input is invalid"

    @abstractmethod
    def validate(self, value: Any, context: Any = None) -> bool:
        """
        Validate the value.

        Args:
            value: Value to validate
            context: Context passed by the input filter

        Returns:
            True if valid, False otherwise
        """
        ...

    def is_valid(self, value: Any, context: Any = None) -> bool:
        """Validate and remember the failure message."""
        result = self.validate(value, context)
        self._messages = [] if result else [self.get_message(value)]
        return result

    def get_message(self, value: Any = None, **params: Any) -> str:
        """Get error message with parameters."""
        return self.message.format(value=value, **params)

    def get_messages(self) -> List[str]:
        """Messages from the last `is_valid` call."""
        return list(getattr(self, "_messages", []))

    def __call__(self, value: Any, context: Any = None) -> bool:
        """Allow rule to be called directly."""
        return self.validate(value, context)


@dataclass
class NotEmpty(Rule):
    """Require value to be present and not empty."""

    message: str = "Value is required and can't be empty"

    def validate(self, value: Any, context: Any = None) -> bool:
        if value is None:
            return False
        if isinstance(value, str) and not value.strip():
            return False
        if isinstance(value, (list, dict, tuple)) and len(value) == 0:
            return False
        return True


@dataclass
class Email(Rule):
    """Validate email format."""

    message: str = "The input is not a valid email address"

    _pattern: ClassVar[Pattern] = re.compile(
        r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"
    )

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(value, str):
            return False
        if ".." in value:
            return False
        return bool(self._pattern.match(value))


@dataclass
class Url(Rule):
    """Validate URL format."""

    message: str = "The input is not a valid URL"
    require_https: bool = False

    _pattern: ClassVar[Pattern] = re.compile(
        r"^https?://"
        r"(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+[A-Z]{2,6}\.?|"
        r"localhost|"
        r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})"
        r"(?::\d+)?"
        r"(?:/?|[/?]\S+)$",
        re.IGNORECASE,
    )

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(value, str):
            return False
        if self.require_https and not value.lower().startswith("https://"):
            return False
        return bool(self._pattern.match(value))


@dataclass
class Min(Rule):
    """Minimum value for numbers, length for strings/arrays."""

    min_value: Union[int, float]
    message: str = "The input must be at least {min}"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return value >= self.min_value
        if isinstance(value, (str, list, dict)):
            return len(value) >= self.min_value
        return False

    def get_message(self, value: Any = None, **params: Any) -> str:
        return self.message.format(value=value, min=self.min_value)


@dataclass
class Max(Rule):
    """Maximum value for numbers, length for strings/arrays."""

    max_value: Union[int, float]
    message: str = "The input must not exceed {max}"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return value <= self.max_value
        if isinstance(value, (str, list, dict)):
            return len(value) <= self.max_value
        return False

    def get_message(self, value: Any = None, **params: Any) -> str:
        return self.message.format(value=value, max=self.max_value)


@dataclass
class Between(Rule):
    """Number between two bounds."""

    min_value: Union[int, float]
    max_value: Union[int, float]
    inclusive: bool = True
    message: str = "The input is not between {min} and {max}"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, str):
            try:
                value = float(value)
            except ValueError:
                return False
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if self.inclusive:
            return self.min_value <= value <= self.max_value
        return self.min_value < value < self.max_value

    def get_message(self, value: Any = None, **params: Any) -> str:
        return self.message.format(value=value, min=self.min_value, max=self.max_value)


@dataclass
class StringLength(Rule):
    """String length within a range; no maximum when `max` is None."""

    min: int = 0
    max: Optional[int] = None
    message: str = "The input length must be between {min} and {max} characters"

    def __post_init__(self):
        if self.max is None and self.message == StringLength.message:
            self.message = "The input must be at least {min} characters long"

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(value, str):
            return False
        length = len(value)
        if length < self.min:
            return False
        return self.max is None or length <= self.max

    def get_message(self, value: Any = None, **params: Any) -> str:
        return self.message.format(value=value, min=self.min, max=self.max)


@dataclass
class Regex(Rule):
    """Match regular expression."""

    pattern: Union[str, Pattern]
    message: str = "The input does not match the expected format"

    def __post_init__(self):
        if isinstance(self.pattern, str):
            self.pattern = re.compile(self.pattern)

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            return False
        return bool(self.pattern.search(value))


@dataclass
class InArray(Rule):
    """Value must be in haystack."""

    haystack: List[Any]
    strict: bool = True
    message: str = "The input was not found in the haystack"

    def validate(self, value: Any, context: Any = None) -> bool:
        if self.strict:
            return value in self.haystack
        return str(value) in [str(item) for item in self.haystack]


@dataclass
class NotInArray(Rule):
    """Value must not be in haystack."""

    haystack: List[Any]
    message: str = "The input is not allowed"

    def validate(self, value: Any, context: Any = None) -> bool:
        return value not in self.haystack


@dataclass
class Numeric(Rule):
    """Value must be numeric."""

    message: str = "The input must be a number"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            return True
        if isinstance(value, str):
            try:
                float(value)
                return True
            except ValueError:
                return False
        return False


@dataclass
class Integer(Rule):
    """Value must be an integer."""

    message: str = "The input must be an integer"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, str):
            try:
                int(value)
                return True
            except ValueError:
                return False
        return False


@dataclass
class Digits(Rule):
    """Value must contain only digits."""

    message: str = "The input must contain only digits"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if not isinstance(value, str):
            return False
        return value.isdigit()


@dataclass
class Alpha(Rule):
    """Value must contain only letters."""

    message: str = "The input must only contain letters"

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(value, str):
            return False
        return value.isalpha()


@dataclass
class AlphaNumeric(Rule):
    """Value must contain only letters and numbers."""

    message: str = "The input must only contain letters and numbers"

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(value, str):
            return False
        return value.isalnum()


@dataclass
class Date(Rule):
    """Value must be a valid date."""

    format: str = "%Y-%m-%d"
    message: str = "The input is not a valid date"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, date):
            return True
        if isinstance(value, str):
            try:
                datetime.strptime(value, self.format)
                return True
            except ValueError:
                return False
        return False


@dataclass
class DateTime(Rule):
    """Value must be a valid datetime."""

    format: str = "%Y-%m-%d %H:%M:%S"
    message: str = "The input is not a valid datetime"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, datetime):
            return True
        if isinstance(value, str):
            try:
                datetime.strptime(value, self.format)
                return True
            except ValueError:
                return False
        return False


@dataclass
class Identical(Rule):
    """
    Value must match another field of the context.

    Example:
        Input(name="password_confirm", validators=[Identical(token="password")])
    """

    token: str
    strict: bool = True
    message: str = "The two given tokens do not match"

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(context, Mapping) or self.token not in context:
            return False
        other = context[self.token]
        if self.strict:
            return value == other and type(value) is type(other)
        return str(value) == str(other)


@dataclass
class Different(Rule):
    """Value must be different from another field of the context."""

    token: str
    message: str = "The input must be different from {token}"

    def validate(self, value: Any, context: Any = None) -> bool:
        if not isinstance(context, Mapping):
            return True
        return value != context.get(self.token)

    def get_message(self, value: Any = None, **params: Any) -> str:
        return self.message.format(value=value, token=self.token)


@dataclass
class Uuid(Rule):
    """Value must be a valid UUID."""

    message: str = "The input must be a valid UUID"
    version: Optional[int] = None

    def validate(self, value: Any, context: Any = None) -> bool:
        try:
            parsed = uuid_module.UUID(str(value))
        except (ValueError, AttributeError):
            return False
        if self.version:
            return parsed.version == self.version
        return True


@dataclass
class Json(Rule):
    """Value must be valid JSON."""

    message: str = "The input must be valid JSON"

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, (dict, list)):
            return True
        if isinstance(value, (str, bytes)):
            try:
                orjson.loads(value)
                return True
            except orjson.JSONDecodeError:
                return False
        return False


@dataclass
class IsArray(Rule):
    """Value must be a list."""

    message: str = "The input must be an array"

    def validate(self, value: Any, context: Any = None) -> bool:
        return isinstance(value, list)


@dataclass
class Boolean(Rule):
    """Value must be a boolean or a boolean-like literal."""

    message: str = "The input must be true or false"

    _accepted: ClassVar[tuple] = ("1", "0", "true", "false", "yes", "no", "on", "off")

    def validate(self, value: Any, context: Any = None) -> bool:
        if isinstance(value, bool):
            return True
        if isinstance(value, int):
            return value in (0, 1)
        if isinstance(value, str):
            return value.strip().lower() in self._accepted
        return False


@dataclass
class Callback(Rule):
    """
    Rule wrapper for callable validators.

    The callable receives ``(value, context)``, or only ``value``
    when ``pass_context`` is False.
    """

    func: Callable[..., Any]
    pass_context: bool = True
    message: str = "The input is not valid"

    def validate(self, value: Any, context: Any = None) -> bool:
        try:
            if self.pass_context:
                return bool(self.func(value, context))
            return bool(self.func(value))
        except Exception:
            return False
