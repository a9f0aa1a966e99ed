"""
NexaFilter Base Input Filter
============================

The composite at the heart of NexaFilter.

A BaseInputFilter holds named children, each either a leaf input or
a nested input filter, and:

- distributes incoming data to every child (``set_data``)
- validates the active validation group (``is_valid``)
- partitions children into valid and invalid sets
- collects filtered values, raw values and messages

Example:
    signup = BaseInputFilter()
    signup.add(Input("email", validators=[Email()]))
    signup.add(Input("nickname", allow_empty=True))

    signup.set_data({"email": "not-an-email", "nickname": ""})

    signup.is_valid()          # False
    signup.get_messages()      # {"email": ["The input is not a valid email address"]}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from nexafilter.core.exceptions import InputFilterRuntimeError, InvalidArgumentError
from nexafilter.core.interfaces import (
    VALIDATE_ALL,
    InputFilterInterface,
    InputInterface,
)
from nexafilter.inputs.array_input import ArrayInput
from nexafilter.utils.logger import get_logger

logger = get_logger("nexafilter.core")

Child = Union[InputInterface, InputFilterInterface]


class CollectionCapable(ABC):
    """
    Input filters that cache per-item results.

    Such children are cleared before every data distribution.
    """

    @abstractmethod
    def clear_values(self) -> Any:
        """Drop the collected filtered values."""
        ...

    @abstractmethod
    def clear_raw_values(self) -> Any:
        """Drop the collected raw values."""
        ...


class BaseInputFilter(InputFilterInterface):
    """
    Ordered registry of named inputs and nested input filters.

    Adding an input under a name already held by a leaf input merges
    the new input into the existing one; the registry keeps the
    original object. A name held by a nested input filter is simply
    overwritten.
    """

    VALIDATE_ALL = VALIDATE_ALL

    def __init__(self) -> None:
        self._data: Optional[Dict[Any, Any]] = None
        self._inputs: Dict[Any, Child] = {}
        self._validation_group: Optional[List[Any]] = None
        self._valid_inputs: Dict[Any, Child] = {}
        self._invalid_inputs: Dict[Any, Child] = {}

    def init(self) -> None:
        """Hook for subclasses to register their inputs."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} inputs={list(self._inputs)!r}>"

    def __len__(self) -> int:
        return len(self._inputs)

    def __contains__(self, name: Any) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._inputs))

    # Child management

    def _assert_child(self, child: Any, method: str) -> None:
        if not isinstance(child, (InputInterface, InputFilterInterface)):
            raise InvalidArgumentError(
                f"{type(self).__name__}.{method} expects an instance of "
                f"InputInterface or InputFilterInterface as its first argument; "
                f"received {type(child).__name__!r}"
            )

    def count(self) -> int:
        """Number of direct children."""
        return len(self._inputs)

    def add(self, child: Child, name: Any = None) -> BaseInputFilter:
        """
        Add an input or input filter.

        Args:
            child: Leaf input or nested input filter
            name: Registry name; leaf inputs default to their own name

        Returns:
            Self for chaining
        """
        self._assert_child(child, "add")

        if isinstance(child, InputInterface) and (not name or isinstance(name, int)):
            name = child.get_name()

        if name is None or name == "":
            raise InvalidArgumentError(
                f"{type(self).__name__}.add requires a name for {type(child).__name__}"
            )

        existing = self._inputs.get(name)
        if isinstance(existing, InputInterface):
            # Merge into the original; the registry keeps pointing at it
            existing.merge(child)
            return self

        self._inputs[name] = child
        return self

    def replace(self, child: Child, name: Any) -> BaseInputFilter:
        """Replace a registered input."""
        self._assert_child(child, "replace")

        if not self.has(name):
            raise InvalidArgumentError(
                f'{type(self).__name__}.replace: no input found matching "{name}"'
            )

        self._inputs[name] = child
        return self

    def get(self, name: Any) -> Child:
        """Retrieve a registered input."""
        if not self.has(name):
            raise InvalidArgumentError(
                f'{type(self).__name__}.get: no input found matching "{name}"'
            )
        return self._inputs[name]

    def has(self, name: Any) -> bool:
        try:
            return name in self._inputs
        except TypeError:
            return False

    def remove(self, name: Any) -> BaseInputFilter:
        if self.has(name):
            del self._inputs[name]
        return self

    def get_inputs(self) -> Dict[Any, Child]:
        return self._inputs

    def merge(self, other: BaseInputFilter) -> BaseInputFilter:
        """Add every input of another input filter to this one."""
        if not isinstance(other, BaseInputFilter):
            raise InvalidArgumentError(
                f"{type(self).__name__}.merge expects a BaseInputFilter; "
                f"received {type(other).__name__!r}"
            )

        for name, child in list(other.get_inputs().items()):
            self.add(child, name)

        return self

    # Data

    def set_data(self, data: Union[Mapping[Any, Any], Iterable[Any]]) -> BaseInputFilter:
        """
        Set data to use when validating and filtering.

        Every registered child receives a value; children missing from
        ``data`` are cleared.
        """
        self._data = self._to_mapping(data)
        self._populate()
        return self

    def _to_mapping(self, data: Any) -> Dict[Any, Any]:
        """
        Normalize incoming data to a dict.

        Lists and tuples are keyed by position; other iterables must
        yield key/value pairs.
        """
        error = InvalidArgumentError(
            f"{type(self).__name__}.set_data expects a mapping, a list or an "
            f"iterable of key/value pairs; received {type(data).__name__!r}"
        )

        if isinstance(data, Mapping):
            return dict(data)

        if isinstance(data, (list, tuple)):
            return dict(enumerate(data))

        if not isinstance(data, Iterable) or isinstance(data, (str, bytes)):
            raise error

        result: Dict[Any, Any] = {}
        for pair in data:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise error
            key, value = pair
            result[key] = value
        return result

    def _populate(self) -> None:
        """Push the current data into every child."""
        assert self._data is not None

        for name, child in self._inputs.items():
            if isinstance(child, CollectionCapable):
                child.clear_values()
                child.clear_raw_values()

            value = self._data.get(name)

            if value is None:
                if isinstance(child, InputFilterInterface):
                    child.set_data({})
                elif isinstance(child, ArrayInput):
                    child.set_value([])
                else:
                    child.set_value(None)
                continue

            if isinstance(child, InputFilterInterface):
                child.set_data(value)
            else:
                child.set_value(value)

        logger.debug(
            "Data distributed",
            filter=type(self).__name__,
            inputs=len(self._inputs),
            keys=len(self._data),
        )

    # Validation

    def _active_names(self) -> List[Any]:
        return list(self._validation_group or self._inputs)

    def _child_for(self, name: Any) -> Child:
        if not self.has(name):
            raise InvalidArgumentError(
                f'{type(self).__name__}: validation group references unknown input "{name}"'
            )
        return self._inputs[name]

    def is_valid(self, context: Any = None) -> bool:
        """
        Is the data set valid?

        Args:
            context: Passed to leaf validators; defaults to the raw values

        Raises:
            InputFilterRuntimeError: when no data was ever set
        """
        if self._data is None:
            raise InputFilterRuntimeError(
                f"{type(self).__name__}.is_valid: no data present to validate!"
            )

        return self._validate_inputs(self._active_names(), self.get_raw_values(), context)

    def _validate_inputs(
        self,
        names: List[Any],
        data: Mapping[Any, Any],
        context: Any = None,
    ) -> bool:
        """Validate the given children against the current data."""
        data = dict(data)

        self._valid_inputs = {}
        self._invalid_inputs = {}
        valid = True

        for name in names:
            child = self._child_for(name)

            # Validators may look the field up in the context
            if name not in data:
                data[name] = None

            if isinstance(child, InputFilterInterface):
                if child.is_valid(context):
                    self._valid_inputs[name] = child
                else:
                    self._invalid_inputs[name] = child
                    valid = False
                continue

            input_context = context or data

            if child.is_valid(input_context):
                self._valid_inputs[name] = child
                continue

            self._invalid_inputs[name] = child
            valid = False

            if child.break_on_failure():
                logger.debug(
                    "Validation aborted",
                    filter=type(self).__name__,
                    input=name,
                )
                return False

        logger.debug(
            "Validation finished",
            filter=type(self).__name__,
            valid=valid,
            invalid=list(self._invalid_inputs),
        )
        return valid

    def set_validation_group(self, *names: Any) -> BaseInputFilter:
        """
        Restrict validation and value retrieval to a set of inputs.

        Accepts ``VALIDATE_ALL``, a list of names, several names, or a
        mapping of nested input filter names to their own groups:

            f.set_validation_group("email", "password")
            f.set_validation_group(["email", "address"])
            f.set_validation_group({"address": ["city"], 0: "email"})
            f.set_validation_group(VALIDATE_ALL)

        An empty group leaves the current one in place. The whole tree
        of groups is checked before any of it is applied, so a rejected
        group changes nothing.
        """
        self._apply_validation_group(self._plan_validation_group(names))
        return self

    def _plan_validation_group(self, names: Tuple[Any, ...]) -> Any:
        """
        Resolve a validation group without touching any state.

        Returns ``VALIDATE_ALL``, ``None`` for an empty group, or a
        ``(selected, nested)`` pair where ``nested`` lists
        ``(child, group, child_plan)`` entries.
        """
        if names and names[0] is VALIDATE_ALL:
            return VALIDATE_ALL

        nested = []
        if len(names) == 1 and isinstance(names[0], (Mapping, list, tuple)):
            spec = names[0]
            items = spec.items() if isinstance(spec, Mapping) else enumerate(spec)
            selected: List[Any] = []

            for key, value in items:
                if not self.has(key):
                    selected.append(value)
                    continue

                selected.append(key)

                child = self._inputs[key]
                if not isinstance(child, InputFilterInterface):
                    raise InvalidArgumentError(
                        f'Input "{key}" must implement InputFilterInterface'
                    )

                child_plan = None
                if isinstance(child, BaseInputFilter):
                    child_plan = child._plan_validation_group((value,))
                nested.append((child, value, child_plan))
        else:
            selected = list(names)

        if not selected:
            return None

        self._validate_validation_group(selected)
        return selected, nested

    def _apply_validation_group(self, plan: Any) -> None:
        if plan is None:
            return

        if plan is VALIDATE_ALL:
            self._validation_group = None
            for child in self._inputs.values():
                if isinstance(child, InputFilterInterface):
                    child.set_validation_group(VALIDATE_ALL)
            logger.debug("Validation group cleared", filter=type(self).__name__)
            return

        selected, nested = plan

        # Populate validation groups of nested input filters
        for child, group, child_plan in nested:
            if isinstance(child, BaseInputFilter):
                child._apply_validation_group(child_plan)
            else:
                child.set_validation_group(group)

        self._validation_group = selected
        logger.debug(
            "Validation group set",
            filter=type(self).__name__,
            group=selected,
        )

    def get_validation_group(self) -> Optional[List[Any]]:
        return None if self._validation_group is None else list(self._validation_group)

    def _validate_validation_group(self, names: List[Any]) -> None:
        """Ensure all names of a validation group are registered."""
        for name in names:
            if not self.has(name):
                raise InvalidArgumentError(
                    "set_validation_group() expects a list of valid input names; "
                    f'"{name}" was not found'
                )

    # Results

    def get_invalid_input(self) -> Dict[Any, Child]:
        return self._invalid_inputs

    def get_valid_input(self) -> Dict[Any, Child]:
        return self._valid_inputs

    def get_value(self, name: Any) -> Any:
        """Filtered value of a named input."""
        if not self.has(name):
            raise InvalidArgumentError(
                f"{type(self).__name__}.get_value expects a valid input name; "
                f'"{name}" was not found in the filter'
            )

        child = self._inputs[name]
        if isinstance(child, InputFilterInterface):
            return child.get_values()
        return child.get_value()

    def get_values(self) -> Dict[Any, Any]:
        """Filtered values of the validation group."""
        values: Dict[Any, Any] = {}
        for name in self._active_names():
            child = self._child_for(name)
            if isinstance(child, InputFilterInterface):
                values[name] = child.get_values()
                continue
            values[name] = child.get_value()
        return values

    def get_raw_value(self, name: Any) -> Any:
        """Unfiltered value of a named input."""
        if not self.has(name):
            raise InvalidArgumentError(
                f"{type(self).__name__}.get_raw_value expects a valid input name; "
                f'"{name}" was not found in the filter'
            )

        child = self._inputs[name]
        if isinstance(child, InputFilterInterface):
            return child.get_raw_values()
        return child.get_raw_value()

    def get_raw_values(self) -> Dict[Any, Any]:
        """Unfiltered values of every input, ignoring the validation group."""
        values: Dict[Any, Any] = {}
        for name, child in self._inputs.items():
            if isinstance(child, InputFilterInterface):
                values[name] = child.get_raw_values()
                continue
            values[name] = child.get_raw_value()
        return values

    def get_messages(self) -> Dict[Any, Any]:
        """Messages of the inputs that failed the last validation pass."""
        return {name: child.get_messages() for name, child in self._invalid_inputs.items()}

    # Unknown inputs

    def _unknown_keys(self, method: str) -> List[Any]:
        if self._data is None:
            raise InputFilterRuntimeError(f"{type(self).__name__}.{method}: no data present!")
        return [key for key in self._data if not self.has(key)]

    def has_unknown(self) -> bool:
        """Does the data contain keys that match no input?"""
        diff = self._unknown_keys("has_unknown")
        if diff:
            # The intersection is always empty for keys outside the registry
            return len([key for key in diff if self.has(key)]) == 0
        return False

    def get_unknown(self) -> Dict[Any, Any]:
        """Data entries that match no input."""
        return {key: self._data[key] for key in self._unknown_keys("get_unknown")}
