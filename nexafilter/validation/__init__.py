"""
NexaFilter Validation
=====================

Validators and validator chains attached to inputs.

Features:
- Rule-based validators
- Callable validators
- Context-aware validators (Identical, Different)
- Break-chain-on-failure chains
"""

from nexafilter.validation.chain import ChainedValidator, ValidatorChain
from nexafilter.validation.rules import (
    Rule,
    NotEmpty,
    Email,
    Url,
    Min,
    Max,
    Between,
    StringLength,
    Regex,
    InArray,
    NotInArray,
    Numeric,
    Integer,
    Digits,
    Alpha,
    AlphaNumeric,
    Date,
    DateTime,
    Identical,
    Different,
    Uuid,
    Json,
    IsArray,
    Boolean,
    Callback,
    is_empty_value,
)

__all__ = [
    # Chain
    "ChainedValidator",
    "ValidatorChain",
    # Rules
    "Rule",
    "NotEmpty",
    "Email",
    "Url",
    "Min",
    "Max",
    "Between",
    "StringLength",
    "Regex",
    "InArray",
    "NotInArray",
    "Numeric",
    "Integer",
    "Digits",
    "Alpha",
    "AlphaNumeric",
    "Date",
    "DateTime",
    "Identical",
    "Different",
    "Uuid",
    "Json",
    "IsArray",
    "Boolean",
    "Callback",
    "is_empty_value",
]
