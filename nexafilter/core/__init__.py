"""
NexaFilter Core Module
======================

Contains the fundamental building blocks of NexaFilter:
- BaseInputFilter: Composite of named inputs and nested input filters
- InputFilter: Concrete input filter with declarative inputs
- CollectionInputFilter: Per-item validation of list values
- Config: Configuration management
- validate / validate_or_fail: One-call validation helpers
"""

from nexafilter.core.exceptions import (
    InputFilterError,
    InvalidArgumentError,
    InputFilterRuntimeError,
    ValidationError,
)
from nexafilter.core.config import Config, get_config, reset_config
from nexafilter.core.interfaces import (
    VALIDATE_ALL,
    InputFilterInterface,
    InputInterface,
    ValidationGroup,
)
from nexafilter.core.base import BaseInputFilter, CollectionCapable
from nexafilter.core.input_filter import InputFilter, InputFilterMeta
from nexafilter.core.collection import CollectionInputFilter
from nexafilter.core.result import ValidationResult, validate, validate_or_fail

__all__ = [
    "InputFilterError",
    "InvalidArgumentError",
    "InputFilterRuntimeError",
    "ValidationError",
    "Config",
    "get_config",
    "reset_config",
    "VALIDATE_ALL",
    "InputFilterInterface",
    "InputInterface",
    "ValidationGroup",
    "BaseInputFilter",
    "CollectionCapable",
    "InputFilter",
    "InputFilterMeta",
    "CollectionInputFilter",
    "ValidationResult",
    "validate",
    "validate_or_fail",
]
