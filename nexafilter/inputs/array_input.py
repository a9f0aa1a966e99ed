"""
NexaFilter Array Input
======================

Input whose value is a list; filters and validators apply per element.
"""

from __future__ import annotations

from typing import Any, List

from nexafilter.core.exceptions import InvalidArgumentError
from nexafilter.inputs.input import Input


class ArrayInput(Input):
    """
    List-valued input.

    Example:
        tags = ArrayInput("tags", filters=[StringTrim()], validators=[Alpha()])
        tags.set_value([" red", "blue "])

        tags.get_value()    # ["red", "blue"]
    """

    def __init__(self, name: Any = None, **options: Any) -> None:
        super().__init__(name, **options)
        self._value: List[Any] = []

    def set_value(self, value: Any) -> ArrayInput:
        if not isinstance(value, list):
            raise InvalidArgumentError(
                f"ArrayInput.set_value expects a list; received {type(value).__name__}"
            )
        return super().set_value(value)

    def reset_value(self) -> ArrayInput:
        super().reset_value()
        self._value = []
        return self

    def get_value(self) -> List[Any]:
        chain = self.get_filter_chain()
        return [chain.filter(item) for item in self._value]

    def is_valid(self, context: Any = None) -> bool:
        values = self.get_value()
        chain = self.get_validator_chain()

        if not values:
            if not self.is_required() or self.allow_empty():
                self._failed = False
                return True
            self._inject_not_empty_validator()
            self._failed = not chain.is_valid(values, context)
            return not self._failed

        self._inject_not_empty_validator()
        result = True

        for item in values:
            if self._skip_empty(item):
                continue

            result = chain.is_valid(item, context)
            if not result:
                if self.has_fallback():
                    self.set_value(self.get_fallback_value())
                    result = True
                break

        self._failed = not result
        return result
