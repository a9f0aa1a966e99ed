"""
NexaFilter Validator Chain
==========================

Ordered list of validators run against one value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Union

from nexafilter.core.exceptions import InvalidArgumentError
from nexafilter.validation.rules import Callback, Rule

ValidatorSpec = Union[Rule, Callable[..., Any]]


@dataclass
class ChainedValidator:
    """A validator and its break-chain flag."""

    validator: Rule
    break_chain_on_failure: bool = False


class ValidatorChain:
    """
    Run validators in order and collect the messages of the failing ones.

    Example:
        chain = ValidatorChain()
        chain.attach(NotEmpty(), break_chain_on_failure=True)
        chain.attach(StringLength(min=3, max=5))

        chain.is_valid("ab")    # False
        chain.get_messages()    # ["The input length must be between 3 and 5 characters"]
    """

    def __init__(self, validators: Iterable[ValidatorSpec] = ()) -> None:
        self._validators: List[ChainedValidator] = []
        self._messages: List[str] = []

        for validator in validators:
            self.attach(validator)

    @staticmethod
    def _coerce(validator: ValidatorSpec) -> Rule:
        if isinstance(validator, Rule):
            return validator
        if callable(validator):
            return Callback(validator)
        raise InvalidArgumentError(
            f"Expected a Rule or callable validator; received {type(validator).__name__}"
        )

    def attach(
        self,
        validator: ValidatorSpec,
        break_chain_on_failure: bool = False,
    ) -> ValidatorChain:
        """Append a validator."""
        self._validators.append(
            ChainedValidator(self._coerce(validator), break_chain_on_failure)
        )
        return self

    def prepend(
        self,
        validator: ValidatorSpec,
        break_chain_on_failure: bool = False,
    ) -> ValidatorChain:
        """Insert a validator at the front of the chain."""
        self._validators.insert(
            0, ChainedValidator(self._coerce(validator), break_chain_on_failure)
        )
        return self

    def merge(self, other: ValidatorChain) -> ValidatorChain:
        """Append all validators of another chain."""
        for item in other.get_validators():
            self._validators.append(
                ChainedValidator(item.validator, item.break_chain_on_failure)
            )
        return self

    def get_validators(self) -> List[ChainedValidator]:
        return list(self._validators)

    def has(self, rule_type: type) -> bool:
        """Check if a validator of the given type is attached."""
        return any(isinstance(item.validator, rule_type) for item in self._validators)

    def is_valid(self, value: Any, context: Any = None) -> bool:
        """Validate value against every attached validator."""
        self._messages = []
        result = True

        for item in self._validators:
            if item.validator.is_valid(value, context):
                continue

            result = False
            self._messages.extend(item.validator.get_messages())

            if item.break_chain_on_failure:
                break

        return result

    def get_messages(self) -> List[str]:
        return list(self._messages)

    def count(self) -> int:
        return len(self._validators)

    def __len__(self) -> int:
        return len(self._validators)

    def __iter__(self) -> Iterator[Rule]:
        return iter([item.validator for item in self._validators])
