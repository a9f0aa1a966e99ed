"""Shared fixtures for NexaFilter tests."""

import os

import pytest

from nexafilter.core.base import BaseInputFilter
from nexafilter.core.config import reset_config
from nexafilter.inputs import ArrayInput, Input
from nexafilter.validation import Digits, StringLength


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from built-in defaults."""
    for key in list(os.environ):
        if key.startswith("NEXAFILTER_"):
            monkeypatch.delenv(key)

    reset_config()
    yield
    reset_config()


@pytest.fixture
def address_filter():
    address = BaseInputFilter()
    address.add(Input("street", required=False))
    address.add(Input("city", validators=[StringLength(min=2)]))
    return address


@pytest.fixture
def signup_filter(address_filter):
    signup = BaseInputFilter()
    signup.add(Input("name", validators=[StringLength(min=3)]))
    signup.add(Input("zip", validators=[Digits()]))
    signup.add(ArrayInput("tags", required=False))
    signup.add(address_filter, "address")
    return signup
