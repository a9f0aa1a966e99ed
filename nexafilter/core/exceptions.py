"""
NexaFilter Exceptions
=====================

Error kinds raised by input filters and inputs.

Validation failures are not exceptions: they are recorded in the
invalid partition and reported through ``get_messages()``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class InputFilterError(Exception):
    """Base class for all NexaFilter errors."""


class InvalidArgumentError(InputFilterError, ValueError):
    """
    Caller supplied a malformed or unknown reference.

    Raised for wrong child types, unknown input names and data that
    is not a mapping.
    """


class InputFilterRuntimeError(InputFilterError, RuntimeError):
    """Operation invoked before a required precondition was met."""


class ValidationError(InputFilterError):
    """
    Validation failed exception.

    Raised only by ``validate_or_fail`` and
    ``ValidationResult.raise_if_invalid``. Contains all messages.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.errors = errors or {}

    def __str__(self) -> str:
        if self.errors:
            error_list = []
            for field_name, messages in self.errors.items():
                if isinstance(messages, dict):
                    error_list.append(f"  - {field_name}: {messages!r}")
                    continue
                for msg in messages:
                    error_list.append(f"  - {field_name}: {msg}")
            return "Validation failed:\n" + "\n".join(error_list)
        return "Validation failed"

    def first(self, field_name: Optional[str] = None) -> Optional[str]:
        """Get first error message."""
        if field_name:
            messages = self.errors.get(field_name, [])
            return _first_message(messages)
        for messages in self.errors.values():
            found = _first_message(messages)
            if found:
                return found
        return None


def _first_message(messages: Any) -> Optional[str]:
    """Find first message in a (possibly nested) message structure."""
    if isinstance(messages, dict):
        for nested in messages.values():
            found = _first_message(nested)
            if found:
                return found
        return None
    if isinstance(messages, (list, tuple)):
        for item in messages:
            found = _first_message(item) if isinstance(item, (dict, list, tuple)) else item
            if found:
                return found
        return None
    return messages or None
