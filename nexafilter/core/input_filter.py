"""
NexaFilter Input Filter
=======================

Concrete input filter with declarative input definitions.
"""

from __future__ import annotations

import copy
from abc import ABCMeta
from typing import Any, Dict

from nexafilter.core.base import BaseInputFilter, Child
from nexafilter.core.interfaces import InputFilterInterface, InputInterface


class InputFilterMeta(ABCMeta):
    """Metaclass for InputFilter to collect declared inputs."""

    def __new__(
        mcs,
        name: str,
        bases: tuple,
        namespace: dict,
        **kwargs: Any,
    ) -> InputFilterMeta:
        declared: Dict[str, Child] = {}

        # Inherit declarations from base classes
        for base in bases:
            if hasattr(base, "_declared_inputs"):
                declared.update(base._declared_inputs)

        for key, value in list(namespace.items()):
            if isinstance(value, InputInterface):
                if not value.get_name():
                    value.set_name(key)
                declared[key] = namespace.pop(key)
            elif isinstance(value, InputFilterInterface):
                declared[key] = namespace.pop(key)

        namespace["_declared_inputs"] = declared

        return super().__new__(mcs, name, bases, namespace, **kwargs)


class InputFilter(BaseInputFilter, metaclass=InputFilterMeta):
    """
    Input filter with class-level input declarations.

    Each instance gets its own copies of the declared inputs, then
    ``init()`` runs so subclasses can add inputs imperatively.

    Example:
        class AddressFilter(InputFilter):
            street = Input(filters=[StringTrim()])
            city = Input(validators=[StringLength(min=2)])

        class SignupFilter(InputFilter):
            email = Input(validators=[Email()], break_on_failure=True)
            password = Input(validators=[StringLength(min=8)])
            address = AddressFilter()

            def init(self):
                self.add(Input("password_confirm", validators=[Identical(token="password")]))

        signup = SignupFilter()
        signup.set_data(request_data)

        if signup.is_valid():
            values = signup.get_values()
    """

    _declared_inputs: Dict[str, Child]

    def __init__(self) -> None:
        super().__init__()

        for name, child in self._declared_inputs.items():
            self.add(copy.deepcopy(child), name)

        self.init()
