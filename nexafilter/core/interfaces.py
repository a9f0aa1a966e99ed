"""
NexaFilter Interfaces
=====================

Capabilities shared by leaf inputs and (nested) input filters.

Every registry operation of an input filter branches on whether a
child is an ``InputInterface`` (a single field) or an
``InputFilterInterface`` (a group of named children).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List


class ValidationGroup(Enum):
    """Validation group sentinels."""

    ALL = "validate_all"

    def __repr__(self) -> str:
        return "VALIDATE_ALL"


VALIDATE_ALL = ValidationGroup.ALL


class InputInterface(ABC):
    """A single named field with its own filter and validator chains."""

    @abstractmethod
    def get_name(self) -> str:
        ...

    @abstractmethod
    def set_value(self, value: Any) -> InputInterface:
        ...

    @abstractmethod
    def get_value(self) -> Any:
        """Filtered value."""

    @abstractmethod
    def get_raw_value(self) -> Any:
        """Value before filtering."""

    @abstractmethod
    def is_valid(self, context: Any = None) -> bool:
        ...

    @abstractmethod
    def break_on_failure(self) -> bool:
        ...

    @abstractmethod
    def get_messages(self) -> List[str]:
        ...

    @abstractmethod
    def merge(self, other: InputInterface) -> InputInterface:
        """Absorb the configuration of another input."""


class InputFilterInterface(ABC):
    """A group of named inputs and input filters."""

    VALIDATE_ALL = VALIDATE_ALL

    @abstractmethod
    def set_data(self, data: Any) -> InputFilterInterface:
        ...

    @abstractmethod
    def is_valid(self, context: Any = None) -> bool:
        ...

    @abstractmethod
    def get_values(self) -> Any:
        ...

    @abstractmethod
    def get_raw_values(self) -> Any:
        ...

    @abstractmethod
    def set_validation_group(self, *names: Any) -> InputFilterInterface:
        ...

    @abstractmethod
    def get_inputs(self) -> Dict[Any, Any]:
        ...

    @abstractmethod
    def get_messages(self) -> Dict[Any, Any]:
        ...

    @abstractmethod
    def get_valid_input(self) -> Dict[Any, Any]:
        ...

    @abstractmethod
    def get_invalid_input(self) -> Dict[Any, Any]:
        ...
