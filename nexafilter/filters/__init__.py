"""
NexaFilter Filters
==================

Value normalization applied before validation.
"""

from nexafilter.filters.chain import FilterChain
from nexafilter.filters.filters import (
    Filter,
    StringTrim,
    StringToLower,
    StringToUpper,
    StripTags,
    StripNewlines,
    HtmlEntities,
    NormalizeUnicode,
    Digits,
    ToInt,
    ToFloat,
    ToBool,
    ToNull,
    Callback,
)

__all__ = [
    "FilterChain",
    "Filter",
    "StringTrim",
    "StringToLower",
    "StringToUpper",
    "StripTags",
    "StripNewlines",
    "HtmlEntities",
    "NormalizeUnicode",
    "Digits",
    "ToInt",
    "ToFloat",
    "ToBool",
    "ToNull",
    "Callback",
]
