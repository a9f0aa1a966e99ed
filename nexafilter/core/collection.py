"""
NexaFilter Collection Input Filter
==================================

Applies one item input filter to every element of a list value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple, Union

from nexafilter.core.base import BaseInputFilter, CollectionCapable
from nexafilter.core.exceptions import InputFilterRuntimeError, InvalidArgumentError
from nexafilter.core.input_filter import InputFilter
from nexafilter.core.interfaces import VALIDATE_ALL
from nexafilter.utils.logger import get_logger

logger = get_logger("nexafilter.core")


class CollectionInputFilter(CollectionCapable, InputFilter):
    """
    Validate a list of items against one input filter.

    Values, raw values and messages are collected per item key (list
    index, or mapping key when the data is a mapping).

    Example:
        phone = InputFilter()
        phone.add(Input("number", validators=[Digits()]))

        phones = CollectionInputFilter(phone, is_required=True)
        phones.set_data([{"number": "123"}, {"number": "abc"}])

        phones.is_valid()       # False
        phones.get_messages()   # {1: {"number": ["The input must contain only digits"]}}
    """

    def __init__(
        self,
        input_filter: Optional[BaseInputFilter] = None,
        *,
        count: Optional[int] = None,
        is_required: bool = False,
    ) -> None:
        super().__init__()
        self._input_filter: Optional[BaseInputFilter] = None
        self._count = count
        self._is_required = is_required
        self._keyed = False
        self._items: List[Tuple[Any, Any]] = []
        self._item_groups: Optional[Dict[Any, Any]] = None
        self._collection_values: Dict[Any, Any] = {}
        self._collection_raw_values: Dict[Any, Any] = {}
        self._collection_messages: Dict[Any, Any] = {}

        if input_filter is not None:
            self.set_input_filter(input_filter)

    # Configuration

    def set_input_filter(self, input_filter: BaseInputFilter) -> CollectionInputFilter:
        if not isinstance(input_filter, BaseInputFilter):
            raise InvalidArgumentError(
                f"{type(self).__name__}.set_input_filter expects a BaseInputFilter; "
                f"received {type(input_filter).__name__!r}"
            )
        self._input_filter = input_filter
        return self

    def get_input_filter(self) -> BaseInputFilter:
        if self._input_filter is None:
            self._input_filter = InputFilter()
        return self._input_filter

    def set_is_required(self, is_required: bool) -> CollectionInputFilter:
        self._is_required = bool(is_required)
        return self

    def get_is_required(self) -> bool:
        return self._is_required

    def set_count(self, count: Optional[int]) -> CollectionInputFilter:
        self._count = count
        return self

    def get_count(self) -> int:
        """Declared item count, or the number of items when none was declared."""
        if self._count is None:
            return len(self._items)
        return self._count

    # Data

    def set_data(self, data: Union[Mapping, List[Any], Tuple[Any, ...]]) -> CollectionInputFilter:
        if isinstance(data, Mapping):
            self._keyed = bool(data)
            self._items = list(data.items())
        elif isinstance(data, (list, tuple)):
            self._keyed = False
            self._items = list(enumerate(data))
        else:
            raise InvalidArgumentError(
                f"{type(self).__name__}.set_data expects a list or a mapping of items; "
                f"received {type(data).__name__!r}"
            )

        self._data = dict(self._items)
        return self

    def _shape(self, collected: Dict[Any, Any]) -> Union[Dict[Any, Any], List[Any]]:
        if self._keyed:
            return dict(collected)
        return list(collected.values())

    def clear_values(self) -> CollectionInputFilter:
        self._collection_values = {}
        return self

    def clear_raw_values(self) -> CollectionInputFilter:
        self._collection_raw_values = {}
        return self

    # Validation

    def _plan_validation_group(self, names: Tuple[Any, ...]) -> Any:
        """
        Resolve per-item validation groups.

        A single group applies to every item; several groups apply by
        position; a mapping assigns groups by item key. Every group is
        checked against the item input filter first.
        """
        if names and names[0] is VALIDATE_ALL:
            return VALIDATE_ALL

        if not names:
            return None

        if len(names) == 1 and isinstance(names[0], Mapping):
            groups = dict(names[0])
        elif len(names) == 1:
            groups = {None: names[0]}
        else:
            groups = dict(enumerate(names))

        input_filter = self.get_input_filter()
        for group in groups.values():
            input_filter._plan_validation_group((group,))
        return groups

    def _apply_validation_group(self, plan: Any) -> None:
        if plan is None:
            return

        if plan is VALIDATE_ALL:
            self._item_groups = None
            self.get_input_filter().set_validation_group(VALIDATE_ALL)
            return

        self._item_groups = plan

    def _group_for(self, index: int, key: Any) -> Any:
        assert self._item_groups is not None
        if None in self._item_groups:
            return self._item_groups[None]
        if key in self._item_groups:
            return self._item_groups[key]
        if index in self._item_groups:
            return self._item_groups[index]
        return VALIDATE_ALL

    def is_valid(self, context: Any = None) -> bool:
        if self._data is None:
            raise InputFilterRuntimeError(
                f"{type(self).__name__}.is_valid: no data present to validate!"
            )

        input_filter = self.get_input_filter()
        valid = True

        if self.get_count() < 1 and self._is_required:
            valid = False

        if len(self._items) < self.get_count():
            valid = False

        self._valid_inputs = {}
        self._invalid_inputs = {}
        self._collection_messages = {}

        if not self._items:
            self.clear_values()
            self.clear_raw_values()
            return valid

        for index, (key, item) in enumerate(self._items):
            input_filter.set_data(item)

            if self._item_groups is not None:
                input_filter.set_validation_group(self._group_for(index, key))

            if input_filter.is_valid(context):
                self._valid_inputs[key] = dict(input_filter.get_valid_input())
            else:
                valid = False
                self._collection_messages[key] = input_filter.get_messages()
                self._invalid_inputs[key] = dict(input_filter.get_invalid_input())

            self._collection_values[key] = input_filter.get_values()
            self._collection_raw_values[key] = input_filter.get_raw_values()

        logger.debug(
            "Collection validated",
            filter=type(self).__name__,
            items=len(self._items),
            invalid=list(self._invalid_inputs),
        )
        return valid

    # Results

    def get_values(self) -> Union[Dict[Any, Any], List[Any]]:
        return self._shape(self._collection_values)

    def get_raw_values(self) -> Union[Dict[Any, Any], List[Any]]:
        if not self._collection_raw_values:
            return self._shape(dict(self._items))
        return self._shape(self._collection_raw_values)

    def get_messages(self) -> Dict[Any, Any]:
        return dict(self._collection_messages)

    def has_unknown(self) -> bool:
        return bool(self.get_unknown())

    def get_unknown(self) -> Dict[Any, Any]:
        """Unknown entries per item."""
        if self._data is None:
            raise InputFilterRuntimeError(f"{type(self).__name__}.get_unknown: no data present!")

        input_filter = self.get_input_filter()
        unknown: Dict[Any, Any] = {}

        for key, item in self._items:
            input_filter.set_data(item)
            if input_filter.has_unknown():
                unknown[key] = input_filter.get_unknown()

        return unknown
