"""
NexaFilter Validation Result
============================

One-call validation helpers returning a result object.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from nexafilter.core.base import BaseInputFilter
from nexafilter.core.exceptions import ValidationError, _first_message


@dataclass
class ValidationResult:
    """
    Result of validation.

    Contains filtered values, raw values and any messages. Messages of
    nested input filters stay nested.
    """

    valid: bool
    values: Dict[Any, Any] = field(default_factory=dict)
    raw_values: Dict[Any, Any] = field(default_factory=dict)
    messages: Dict[Any, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        """Allow using result as boolean."""
        return self.valid

    def failed(self) -> bool:
        """Check if validation failed."""
        return not self.valid

    def has_error(self, field_name: Any) -> bool:
        """Check if field has error."""
        return field_name in self.messages

    def get_errors(self, field_name: Any) -> Any:
        """Get errors for field."""
        return self.messages.get(field_name, [])

    def first_error(self, field_name: Optional[Any] = None) -> Optional[str]:
        """Get first error message."""
        if field_name is not None:
            return _first_message(self.messages.get(field_name, []))
        return _first_message(self.messages)

    def all_errors(self) -> List[str]:
        """Get all error messages as flat list."""
        all_msgs: List[str] = []
        _collect(self.messages, all_msgs)
        return all_msgs

    def raise_if_invalid(self) -> None:
        """Raise ValidationError if invalid."""
        if not self.valid:
            raise ValidationError(errors=self.messages)


def _collect(messages: Any, out: List[str]) -> None:
    if isinstance(messages, Mapping):
        for nested in messages.values():
            _collect(nested, out)
    elif isinstance(messages, (list, tuple)):
        for item in messages:
            _collect(item, out)
    elif messages:
        out.append(messages)


def validate(
    input_filter: BaseInputFilter,
    data: Any,
    context: Any = None,
) -> ValidationResult:
    """
    Set data on an input filter and validate it.

    Example:
        result = validate(signup, {"email": "a@b.co"})

        if not result:
            print(result.messages)
    """
    input_filter.set_data(data)
    valid = input_filter.is_valid(context)

    return ValidationResult(
        valid=valid,
        values=input_filter.get_values(),
        raw_values=input_filter.get_raw_values(),
        messages=input_filter.get_messages(),
    )


def validate_or_fail(
    input_filter: BaseInputFilter,
    data: Any,
    context: Any = None,
) -> Dict[Any, Any]:
    """
    Validate and return filtered values.

    Raises:
        ValidationError: If validation fails
    """
    result = validate(input_filter, data, context)
    result.raise_if_invalid()
    return result.values
