"""
NexaFilter - Input Filtering and Validation
===========================================

Filter and validate nested request data with composable input filters.

Features:
---------
- Named inputs with filter and validator chains
- Nested input filters of arbitrary depth
- Validation groups (validate a subset of fields)
- Break-on-failure inputs
- Collection input filters for lists of items
- Declarative input filters
- Environment-driven configuration and structured logging

Quick Start:
    from nexafilter import Input, InputFilter
    from nexafilter.validation import Email, StringLength

    class SignupFilter(InputFilter):
        email = Input(validators=[Email()])
        password = Input(validators=[StringLength(min=8)])

    signup = SignupFilter()
    signup.set_data({"email": "jane@example.com", "password": "secret"})

    signup.is_valid()        # False
    signup.get_messages()    # {"password": [...]}
"""

from __future__ import annotations

__version__ = "1.0.0-alpha.1"
__license__ = "MIT"

# Core imports (always available)
from nexafilter.core import (
    VALIDATE_ALL,
    BaseInputFilter,
    CollectionInputFilter,
    Config,
    InputFilter,
    InputFilterError,
    InputFilterInterface,
    InputFilterRuntimeError,
    InputInterface,
    InvalidArgumentError,
    ValidationError,
    ValidationResult,
    get_config,
    validate,
    validate_or_fail,
)
from nexafilter.inputs import ArrayInput, Input
from nexafilter.filters import FilterChain
from nexafilter.validation import ValidatorChain
from nexafilter.utils import configure_logging, get_logger

__all__ = [
    "__version__",
    "VALIDATE_ALL",
    "BaseInputFilter",
    "CollectionInputFilter",
    "Config",
    "InputFilter",
    "InputFilterError",
    "InputFilterInterface",
    "InputFilterRuntimeError",
    "InputInterface",
    "InvalidArgumentError",
    "ValidationError",
    "ValidationResult",
    "get_config",
    "validate",
    "validate_or_fail",
    "ArrayInput",
    "Input",
    "FilterChain",
    "ValidatorChain",
    "configure_logging",
    "get_logger",
]
