"""Tests for filters and filter chains."""

import pytest

from nexafilter.core.config import get_config
from nexafilter.core.exceptions import InvalidArgumentError
from nexafilter.filters import (
    Callback,
    Digits,
    FilterChain,
    HtmlEntities,
    NormalizeUnicode,
    StringToLower,
    StringToUpper,
    StringTrim,
    StripNewlines,
    StripTags,
    ToBool,
    ToFloat,
    ToInt,
    ToNull,
)


@pytest.mark.parametrize(
    "item, value, expected",
    [
        (StringTrim(), "  hello  ", "hello"),
        (StringTrim(charlist="-"), "--hello--", "hello"),
        (StringToLower(), "HeLLo", "hello"),
        (StringToUpper(), "HeLLo", "HELLO"),
        (StripTags(), "<b>bold</b> text", "bold text"),
        (StripNewlines(), "a\r\nb\nc", "abc"),
        (HtmlEntities(), '<a href="x">', "&lt;a href=&quot;x&quot;&gt;"),
        (NormalizeUnicode(), "ｆｕｌｌ\x00width", "fullwidth"),
        (Digits(), "+1 (555) 010-99", "155501099"),
        (Digits(), 42, "42"),
        (ToInt(), " 42 ", 42),
        (ToInt(), "4.7", 4),
        (ToInt(), "abc", "abc"),
        (ToFloat(), "2.5", 2.5),
        (ToFloat(), 2, 2.0),
        (ToBool(), "yes", True),
        (ToBool(), "off", False),
        (ToBool(), "maybe", "maybe"),
        (ToNull(), "", None),
        (ToNull(), "   ", None),
        (ToNull(), 0, 0),
        (Callback(lambda v: v * 2), 3, 6),
    ],
)
def test_filters(item, value, expected):
    assert item.filter(value) == expected
    assert item(value) == expected


@pytest.mark.parametrize(
    "item",
    [StringTrim(), StringToLower(), StringToUpper(), StripTags(), StripNewlines(), HtmlEntities()],
)
def test_string_filters_pass_non_strings_through(item):
    assert item.filter(None) is None
    assert item.filter(5) == 5


class TestFilterChain:
    def test_runs_in_attach_order(self):
        chain = FilterChain([StringTrim(), lambda v: v + "!"])

        assert chain.filter("  hi ") == "hi!"

    def test_higher_priority_runs_first(self):
        chain = FilterChain()
        chain.attach(lambda v: v + "a")
        chain.attach(lambda v: v + "b", priority=FilterChain.DEFAULT_PRIORITY + 1)
        chain.attach(lambda v: v + "c", priority=FilterChain.DEFAULT_PRIORITY - 1)

        assert chain.filter("") == "bac"

    def test_default_priority_from_configuration(self):
        get_config().set("filter_chain.default_priority", 10)

        chain = FilterChain()
        chain.attach(lambda v: v + "a")
        chain.attach(lambda v: v + "b", priority=FilterChain.DEFAULT_PRIORITY)

        assert chain.filter("") == "ba"

    def test_merge_keeps_priorities(self):
        first = FilterChain([lambda v: v + "a"])
        second = FilterChain()
        second.attach(lambda v: v + "b", priority=2000)

        first.merge(second)

        assert first.count() == 2
        assert first.filter("") == "ba"

    def test_iteration_follows_run_order(self):
        trim = StringTrim()
        lower = StringToLower()
        chain = FilterChain()
        chain.attach(trim)
        chain.attach(lower, priority=5000)

        assert list(chain) == [lower, trim]
        assert chain.get_filters() == [lower, trim]
        assert len(chain) == 2

    def test_rejects_non_callables(self):
        with pytest.raises(InvalidArgumentError):
            FilterChain().attach(42)

    def test_empty_chain_returns_value(self):
        assert FilterChain().filter("x") == "x"
