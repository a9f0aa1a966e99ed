"""Tests for leaf inputs."""

import copy

import pytest

from nexafilter.core.config import get_config
from nexafilter.core.exceptions import InvalidArgumentError
from nexafilter.filters import StringToLower, StringTrim, ToInt
from nexafilter.inputs import UNSET, ArrayInput, Input
from nexafilter.validation import Alpha, Callback, Digits, Email, NotEmpty, StringLength


class TestInputFlags:
    def test_defaults(self):
        email = Input("email")

        assert email.get_name() == "email"
        assert email.is_required()
        assert not email.allow_empty()
        assert not email.continue_if_empty()
        assert not email.break_on_failure()
        assert email.get_error_message() is None
        assert not email.has_fallback()

    def test_allow_empty_makes_input_optional(self):
        assert not Input("a", allow_empty=True).is_required()
        assert Input("a", allow_empty=True, required=True).is_required()

    def test_defaults_follow_configuration(self):
        settings = get_config()
        settings.set("input.required", False)
        settings.set("input.break_on_failure", True)

        item = Input("a")

        assert not item.is_required()
        assert item.break_on_failure()

    def test_setters_chain(self):
        item = (
            Input()
            .set_name("a")
            .set_required(False)
            .set_allow_empty(True)
            .set_continue_if_empty(True)
            .set_break_on_failure(True)
            .set_error_message("Bad")
        )

        assert item.get_name() == "a"
        assert not item.is_required()
        assert item.allow_empty()
        assert item.continue_if_empty()
        assert item.break_on_failure()
        assert item.get_error_message() == "Bad"

    def test_fallback_value(self):
        item = Input("a", fallback_value=None)

        assert item.has_fallback()
        assert item.get_fallback_value() is None

        item.clear_fallback_value()
        assert not item.has_fallback()

    def test_unset_survives_deepcopy(self):
        assert copy.deepcopy(UNSET) is UNSET
        assert not copy.deepcopy(Input("a")).has_fallback()


class TestInputValue:
    def test_value_is_filtered(self):
        email = Input("email", filters=[StringTrim(), StringToLower()])
        email.set_value("  Jane@Example.COM ")

        assert email.get_raw_value() == "  Jane@Example.COM "
        assert email.get_value() == "jane@example.com"

    def test_callable_filters(self):
        item = Input("a", filters=[str.strip])
        item.set_value(" x ")

        assert item.get_value() == "x"

    def test_has_value(self):
        item = Input("a")
        assert not item.has_value()

        item.set_value(None)
        assert item.has_value()

        item.reset_value()
        assert not item.has_value()


class TestInputValidation:
    def test_required_empty_value_fails(self):
        item = Input("a")
        item.set_value("")

        assert not item.is_valid()
        assert item.get_messages() == ["Value is required and can't be empty"]

    def test_not_empty_injected_once(self):
        item = Input("a", validators=[Alpha()])
        item.set_value("")
        item.is_valid()
        item.is_valid()

        chain = item.get_validator_chain()
        assert chain.count() == 2
        assert isinstance(list(chain)[0], NotEmpty)

    def test_not_empty_breaks_the_chain(self):
        item = Input("a", validators=[StringLength(min=3)])
        item.set_value(None)

        assert not item.is_valid()
        assert item.get_messages() == ["Value is required and can't be empty"]

    def test_optional_empty_value_passes(self):
        item = Input("a", required=False, validators=[Email()])
        item.set_value("")

        assert item.is_valid()
        assert item.get_messages() == []

    def test_allow_empty_skips_validators(self):
        item = Input("a", required=True, allow_empty=True, validators=[Email()])
        item.set_value("")

        assert item.is_valid()

    def test_continue_if_empty_runs_validators(self):
        seen = []

        def must_match_other(value, context):
            seen.append(value)
            return context["other"] == ""

        item = Input("a", allow_empty=True, continue_if_empty=True, validators=[must_match_other])
        item.set_value("")

        assert item.is_valid({"other": ""})
        assert not item.is_valid({"other": "x"})
        assert seen == ["", ""]

    def test_non_empty_value_runs_validators(self):
        item = Input("a", required=False, validators=[Digits()])
        item.set_value("abc")

        assert not item.is_valid()
        assert item.get_messages() == ["The input must contain only digits"]

    def test_filtered_value_is_validated(self):
        item = Input("age", filters=[ToInt()], validators=[Callback(lambda v, c: isinstance(v, int))])
        item.set_value(" 42 ")

        assert item.is_valid()

    def test_messages_of_every_failing_validator(self):
        item = Input("a", validators=[Digits(), StringLength(min=5)])
        item.set_value("abc")

        assert not item.is_valid()
        assert item.get_messages() == [
            "The input must contain only digits",
            "The input must be at least 5 characters long",
        ]

    def test_error_message_overrides(self):
        item = Input("a", validators=[Digits()], error_message="Numbers only")
        item.set_value("abc")

        assert not item.is_valid()
        assert item.get_messages() == ["Numbers only"]

    def test_no_messages_after_success(self):
        item = Input("a", validators=[Digits()], error_message="Numbers only")
        item.set_value("abc")
        item.is_valid()

        item.set_value("123")
        assert item.is_valid()
        assert item.get_messages() == []

    def test_fallback_value_on_failure(self):
        item = Input("a", validators=[Digits()], fallback_value="0")
        item.set_value("abc")

        assert item.is_valid()
        assert item.get_raw_value() == "0"
        assert item.get_messages() == []

    def test_context_reaches_validators(self):
        item = Input("a", validators=[Callback(lambda v, c: c["token"] == v)])
        item.set_value("x")

        assert item.is_valid({"token": "x"})
        assert not item.is_valid({"token": "y"})


class TestInputMerge:
    def test_merge_takes_configuration(self):
        original = Input("a", filters=[StringTrim()], validators=[Digits()])
        incoming = Input(
            "b",
            required=False,
            break_on_failure=True,
            error_message="Bad",
            fallback_value="0",
            filters=[StringToLower()],
            validators=[StringLength(max=3)],
        )

        original.merge(incoming)

        assert original.get_name() == "b"
        assert not original.is_required()
        assert original.break_on_failure()
        assert original.get_error_message() == "Bad"
        assert original.get_fallback_value() == "0"
        assert original.get_filter_chain().count() == 2
        assert original.get_validator_chain().count() == 2

    def test_merge_takes_value_only_when_set(self):
        original = Input("a")
        original.set_value("kept")

        original.merge(Input("a"))
        assert original.get_raw_value() == "kept"

        replacement = Input("a")
        replacement.set_value("new")
        original.merge(replacement)
        assert original.get_raw_value() == "new"


class TestArrayInput:
    def test_requires_list(self):
        tags = ArrayInput("tags")

        with pytest.raises(InvalidArgumentError):
            tags.set_value("red")

    def test_starts_empty(self):
        tags = ArrayInput("tags")

        assert tags.get_raw_value() == []
        assert tags.get_value() == []

        tags.set_value(["a"])
        tags.reset_value()
        assert tags.get_raw_value() == []

    def test_filters_apply_per_element(self):
        tags = ArrayInput("tags", filters=[StringTrim()])
        tags.set_value([" red", "blue "])

        assert tags.get_value() == ["red", "blue"]

    def test_validators_apply_per_element(self):
        tags = ArrayInput("tags", validators=[Alpha()])

        tags.set_value(["red", "blue"])
        assert tags.is_valid()

        tags.set_value(["red", "b1ue"])
        assert not tags.is_valid()
        assert tags.get_messages() == ["The input must only contain letters"]

    def test_optional_empty_list_is_valid(self):
        tags = ArrayInput("tags", required=False, validators=[Alpha()])
        tags.set_value([])

        assert tags.is_valid()

    def test_required_empty_list_fails(self):
        tags = ArrayInput("tags")
        tags.set_value([])

        assert not tags.is_valid()
        assert tags.get_messages() == ["Value is required and can't be empty"]

    def test_empty_elements_skipped_when_allowed(self):
        tags = ArrayInput("tags", allow_empty=True, validators=[Alpha()])
        tags.set_value(["red", ""])

        assert tags.is_valid()

    def test_empty_elements_fail_when_required(self):
        tags = ArrayInput("tags", validators=[Alpha()])
        tags.set_value(["red", ""])

        assert not tags.is_valid()
        assert tags.get_messages() == ["Value is required and can't be empty"]

    def test_fallback_value(self):
        tags = ArrayInput("tags", validators=[Alpha()], fallback_value=["none"])
        tags.set_value(["b1ue"])

        assert tags.is_valid()
        assert tags.get_raw_value() == ["none"]
