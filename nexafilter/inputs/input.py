"""
NexaFilter Input
================

A single named field: raw value, filter chain, validator chain and
the flags that decide how empty values are treated.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from nexafilter.core.config import get_config
from nexafilter.core.interfaces import InputInterface
from nexafilter.filters.chain import FilterChain, FilterSpec
from nexafilter.validation.chain import ValidatorChain, ValidatorSpec
from nexafilter.validation.rules import NotEmpty, is_empty_value


class _Unset:
    """Marker for options that were not given."""

    def __repr__(self) -> str:
        return "<unset>"

    def __copy__(self) -> _Unset:
        return self

    def __deepcopy__(self, memo: dict) -> _Unset:
        return self


UNSET: Any = _Unset()


class Input(InputInterface):
    """
    Leaf input.

    Flags not given explicitly default to the ``input.*`` configuration
    keys. Passing ``allow_empty=True`` without ``required`` makes the
    input optional.

    Example:
        email = Input(
            "email",
            filters=[StringTrim(), StringToLower()],
            validators=[Email()],
        )
        email.set_value("  John@Example.COM ")

        email.get_value()     # "john@example.com"
        email.is_valid()      # True
    """

    def __init__(
        self,
        name: Optional[str] = None,
        *,
        required: Optional[bool] = None,
        allow_empty: Optional[bool] = None,
        continue_if_empty: Optional[bool] = None,
        break_on_failure: Optional[bool] = None,
        error_message: Optional[str] = None,
        fallback_value: Any = UNSET,
        filters: Iterable[FilterSpec] = (),
        validators: Iterable[ValidatorSpec] = (),
    ) -> None:
        settings = get_config()

        if allow_empty is None:
            allow_empty = settings.get_bool("input.allow_empty", False)
        if required is None:
            required = False if allow_empty else settings.get_bool("input.required", True)
        if continue_if_empty is None:
            continue_if_empty = settings.get_bool("input.continue_if_empty", False)
        if break_on_failure is None:
            break_on_failure = settings.get_bool("input.break_on_failure", False)

        self.name = name
        self._required = required
        self._allow_empty = allow_empty
        self._continue_if_empty = continue_if_empty
        self._break_on_failure = break_on_failure
        self._error_message = error_message
        self._fallback_value: Any = UNSET
        if fallback_value is not UNSET:
            self.set_fallback_value(fallback_value)

        self._filter_chain = FilterChain(filters)
        self._validator_chain = ValidatorChain(validators)
        self._not_empty_injected = False

        self._value: Any = None
        self._has_value = False
        self._failed = False

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} required={self._required}>"

    # Configuration

    def get_name(self) -> Optional[str]:
        return self.name

    def set_name(self, name: Optional[str]) -> Input:
        self.name = name
        return self

    def is_required(self) -> bool:
        return self._required

    def set_required(self, required: bool) -> Input:
        self._required = bool(required)
        return self

    def allow_empty(self) -> bool:
        return self._allow_empty

    def set_allow_empty(self, allow_empty: bool) -> Input:
        self._allow_empty = bool(allow_empty)
        return self

    def continue_if_empty(self) -> bool:
        return self._continue_if_empty

    def set_continue_if_empty(self, continue_if_empty: bool) -> Input:
        self._continue_if_empty = bool(continue_if_empty)
        return self

    def break_on_failure(self) -> bool:
        return self._break_on_failure

    def set_break_on_failure(self, break_on_failure: bool) -> Input:
        self._break_on_failure = bool(break_on_failure)
        return self

    def get_error_message(self) -> Optional[str]:
        return self._error_message

    def set_error_message(self, message: Optional[str]) -> Input:
        self._error_message = message
        return self

    def has_fallback(self) -> bool:
        return self._fallback_value is not UNSET

    def get_fallback_value(self) -> Any:
        return None if self._fallback_value is UNSET else self._fallback_value

    def set_fallback_value(self, value: Any) -> Input:
        self._fallback_value = value
        return self

    def clear_fallback_value(self) -> Input:
        self._fallback_value = UNSET
        return self

    def get_filter_chain(self) -> FilterChain:
        return self._filter_chain

    def set_filter_chain(self, chain: FilterChain) -> Input:
        self._filter_chain = chain
        return self

    def get_validator_chain(self) -> ValidatorChain:
        return self._validator_chain

    def set_validator_chain(self, chain: ValidatorChain) -> Input:
        self._validator_chain = chain
        self._not_empty_injected = False
        return self

    # Value

    def set_value(self, value: Any) -> Input:
        self._value = value
        self._has_value = True
        return self

    def reset_value(self) -> Input:
        self._value = None
        self._has_value = False
        return self

    def has_value(self) -> bool:
        return self._has_value

    def get_raw_value(self) -> Any:
        return self._value

    def get_value(self) -> Any:
        return self._filter_chain.filter(self._value)

    # Validation

    def _skip_empty(self, value: Any) -> bool:
        """Empty values bypass the validators unless continue_if_empty is set."""
        if not is_empty_value(value) or self._continue_if_empty:
            return False
        return not self._required or self._allow_empty

    def _inject_not_empty_validator(self) -> None:
        if self._continue_if_empty or self._not_empty_injected:
            return
        if not self._required and self._allow_empty:
            return
        self._not_empty_injected = True
        if self._validator_chain.has(NotEmpty):
            return
        self._validator_chain.prepend(NotEmpty(), break_chain_on_failure=True)

    def is_valid(self, context: Any = None) -> bool:
        value = self.get_value()

        if self._skip_empty(value):
            self._failed = False
            return True

        self._inject_not_empty_validator()
        result = self._validator_chain.is_valid(value, context)

        if not result and self.has_fallback():
            self.set_value(self._fallback_value)
            result = True

        self._failed = not result
        return result

    def get_messages(self) -> List[str]:
        if not self._failed:
            return []
        if self._error_message is not None:
            return [self._error_message]
        return self._validator_chain.get_messages()

    def merge(self, other: InputInterface) -> Input:
        """
        Absorb another input's configuration.

        Flags, name and messages are taken from ``other``; its filters
        and validators are appended to this input's chains.
        """
        self.set_name(other.get_name())
        self.set_break_on_failure(other.break_on_failure())

        if isinstance(other, Input):
            self.set_required(other.is_required())
            self.set_allow_empty(other.allow_empty())
            self.set_continue_if_empty(other.continue_if_empty())
            self.set_error_message(other.get_error_message())
            if other.has_fallback():
                self.set_fallback_value(other.get_fallback_value())
            self._filter_chain.merge(other.get_filter_chain())
            self._validator_chain.merge(other.get_validator_chain())

        if not isinstance(other, Input) or other.has_value():
            self.set_value(other.get_raw_value())

        return self
