"""Tests for CollectionInputFilter."""

import pytest

from nexafilter import VALIDATE_ALL
from nexafilter.core.base import BaseInputFilter, CollectionCapable
from nexafilter.core.collection import CollectionInputFilter
from nexafilter.core.exceptions import InputFilterRuntimeError, InvalidArgumentError
from nexafilter.core.input_filter import InputFilter
from nexafilter.filters import StringTrim
from nexafilter.inputs import Input
from nexafilter.validation import Digits


@pytest.fixture
def phone():
    item = InputFilter()
    item.add(Input("number", filters=[StringTrim()], validators=[Digits()]))
    item.add(Input("label", required=False))
    return item


@pytest.fixture
def phones(phone):
    return CollectionInputFilter(phone)


def test_item_filter_is_created_lazily():
    collection = CollectionInputFilter()

    assert isinstance(collection.get_input_filter(), InputFilter)
    assert collection.get_input_filter() is collection.get_input_filter()


def test_item_filter_must_be_an_input_filter():
    with pytest.raises(InvalidArgumentError):
        CollectionInputFilter().set_input_filter(Input("x"))


def test_set_data_rejects_scalars(phones):
    with pytest.raises(InvalidArgumentError):
        phones.set_data("555")


def test_requires_data(phones):
    with pytest.raises(InputFilterRuntimeError):
        phones.is_valid()


def test_validates_every_item(phones):
    phones.set_data([{"number": " 555 "}, {"number": "abc", "label": "work"}])

    assert not phones.is_valid()
    assert phones.get_messages() == {1: {"number": ["The input must contain only digits"]}}
    assert list(phones.get_valid_input()) == [0]
    assert list(phones.get_invalid_input()) == [1]


def test_values_per_item(phones):
    phones.set_data([{"number": " 555 "}, {"number": "123", "label": "work"}])

    assert phones.is_valid()
    assert phones.get_values() == [
        {"number": "555", "label": None},
        {"number": "123", "label": "work"},
    ]
    assert phones.get_raw_values() == [
        {"number": " 555 ", "label": None},
        {"number": "123", "label": "work"},
    ]


def test_mapping_items_keep_their_keys(phones):
    phones.set_data({"home": {"number": "1"}, "work": {"number": "2"}})

    assert phones.is_valid()
    assert phones.get_values() == {
        "home": {"number": "1", "label": None},
        "work": {"number": "2", "label": None},
    }


def test_raw_values_before_validation(phones):
    phones.set_data([{"number": "1"}])

    assert phones.get_raw_values() == [{"number": "1"}]


def test_count(phones):
    assert phones.get_count() == 0

    phones.set_data([{"number": "1"}, {"number": "2"}])
    assert phones.get_count() == 2

    phones.set_count(3)
    assert phones.get_count() == 3


def test_fewer_items_than_count(phones):
    phones.set_count(2)
    phones.set_data([{"number": "1"}])

    assert not phones.is_valid()


def test_required_collection_needs_items(phones):
    phones.set_is_required(True)
    phones.set_data([])

    assert phones.get_is_required()
    assert not phones.is_valid()
    assert phones.get_values() == []


def test_optional_empty_collection(phones):
    phones.set_data([])

    assert phones.is_valid()
    assert phones.get_values() == []
    assert phones.get_messages() == {}


def test_single_group_applies_to_every_item(phones):
    phones.set_validation_group(["label"])
    phones.set_data([{"number": "abc", "label": "home"}, {"number": "x"}])

    assert phones.is_valid()
    assert phones.get_values() == [{"label": "home"}, {"label": None}]


def test_positional_groups(phones):
    phones.set_validation_group(["label"], ["number"])
    phones.set_data([{"number": "abc"}, {"number": "x"}, {"number": "y"}])

    assert not phones.is_valid()
    assert list(phones.get_invalid_input()) == [1, 2]


def test_validate_all_clears_groups(phones, phone):
    phones.set_validation_group(["label"])
    phones.set_data([{"number": "abc"}])
    phones.is_valid()

    phones.set_validation_group(VALIDATE_ALL)

    assert not phones.is_valid()
    assert phone.get_validation_group() is None


def test_unknown_per_item(phones):
    phones.set_data([{"number": "1"}, {"number": "2", "extra": True}])

    assert phones.has_unknown()
    assert phones.get_unknown() == {1: {"extra": True}}


def test_unknown_requires_data(phones):
    with pytest.raises(InputFilterRuntimeError):
        phones.get_unknown()


def test_nested_in_parent(phones):
    contact = BaseInputFilter()
    contact.add(Input("name"))
    contact.add(phones, "phones")

    contact.set_data({"name": "Jane", "phones": [{"number": "1"}, {"number": "x"}]})

    assert not contact.is_valid()
    assert contact.get_messages() == {
        "phones": {1: {"number": ["The input must contain only digits"]}},
    }
    assert contact.get_raw_values()["phones"] == [
        {"number": "1", "label": None},
        {"number": "x", "label": None},
    ]


def test_parent_clears_cached_values(phones):
    contact = BaseInputFilter()
    contact.add(phones, "phones")

    contact.set_data({"phones": [{"number": "1"}]})
    contact.is_valid()
    assert phones.get_values() == [{"number": "1", "label": None}]

    contact.set_data({})
    assert phones.get_values() == []
    assert contact.is_valid()


def test_declared_count_and_requirement():
    collection = CollectionInputFilter(count=1, is_required=True)
    collection.set_data([])

    assert not collection.is_valid()


def test_collection_is_collection_capable(phones):
    assert isinstance(phones, CollectionCapable)

    with pytest.raises(TypeError):
        CollectionCapable()


def test_group_names_are_checked_against_the_item_filter(phones):
    with pytest.raises(InvalidArgumentError):
        phones.set_validation_group(["bogus"])


def test_rejected_group_keeps_previous_groups(phones, phone):
    phones.set_validation_group(["label"])

    with pytest.raises(InvalidArgumentError):
        phones.set_validation_group(["number"], ["bogus"])

    phones.set_data([{"number": "abc"}, {"number": "x"}])

    assert phones.is_valid()
    assert phones.get_values() == [{"label": None}, {"label": None}]


def test_rejected_nested_collection_group_is_atomic(phones):
    contact = BaseInputFilter()
    contact.add(Input("name"))
    contact.add(phones, "phones")

    with pytest.raises(InvalidArgumentError):
        contact.set_validation_group({"phones": ["nope"], 0: "name"})

    assert contact.get_validation_group() is None
    contact.set_data({"name": "Jane", "phones": [{"number": "x"}]})
    assert not contact.is_valid()
