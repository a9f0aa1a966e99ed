"""
NexaFilter Filter Chain
=======================

Priority-ordered list of filters applied to one value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, Union

from nexafilter.core.config import get_config
from nexafilter.core.exceptions import InvalidArgumentError
from nexafilter.filters.filters import Callback, Filter

FilterSpec = Union[Filter, Callable[[Any], Any]]


@dataclass
class _Entry:
    filter: Filter
    priority: int
    order: int


class FilterChain:
    """
    Apply filters in priority order.

    Higher priority runs first; filters with equal priority run in
    the order they were attached.

    Example:
        chain = FilterChain()
        chain.attach(StringTrim())
        chain.attach(StringToLower(), priority=FilterChain.DEFAULT_PRIORITY + 1)

        chain.filter("  HeLLo ")   # "hello"
    """

    DEFAULT_PRIORITY = 1000

    def __init__(self, filters: Iterable[FilterSpec] = ()) -> None:
        self._entries: List[_Entry] = []
        self._counter = 0

        for item in filters:
            self.attach(item)

    @staticmethod
    def _coerce(item: FilterSpec) -> Filter:
        if isinstance(item, Filter):
            return item
        if callable(item):
            return Callback(item)
        raise InvalidArgumentError(
            f"Expected a Filter or callable; received {type(item).__name__}"
        )

    def attach(self, item: FilterSpec, priority: Optional[int] = None) -> FilterChain:
        """Attach a filter; priority defaults to ``filter_chain.default_priority``."""
        if priority is None:
            priority = get_config().get_int(
                "filter_chain.default_priority", self.DEFAULT_PRIORITY
            )
        self._entries.append(_Entry(self._coerce(item), priority, self._counter))
        self._counter += 1
        return self

    def merge(self, other: FilterChain) -> FilterChain:
        """Attach every filter of another chain, keeping its priorities."""
        for entry in other._ordered():
            self._entries.append(_Entry(entry.filter, entry.priority, self._counter))
            self._counter += 1
        return self

    def _ordered(self) -> List[_Entry]:
        return sorted(self._entries, key=lambda e: (-e.priority, e.order))

    def get_filters(self) -> List[Filter]:
        """Filters in run order."""
        return [entry.filter for entry in self._ordered()]

    def filter(self, value: Any) -> Any:
        """Run value through every filter."""
        for entry in self._ordered():
            value = entry.filter.filter(value)
        return value

    def count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self.get_filters())
