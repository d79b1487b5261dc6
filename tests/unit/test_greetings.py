# tests/unit/test_greetings.py

"""
Unit tests for the data-echo handlers in src/example_function/hello.py and
src/example_function/goodbye.py.
"""

import copy

import pytest

from example_function.goodbye import goodbye
from example_function.hello import format_name, hello


def test_hello_builds_message_and_echoes_event(named_event):
    expected_data = copy.deepcopy(named_event)

    result = hello(named_event)

    assert result == {"msg": "Hello, Ada!", "data": expected_data}


def test_goodbye_builds_message_and_echoes_event(named_event):
    expected_data = copy.deepcopy(named_event)

    result = goodbye(named_event)

    assert result == {"msg": "Goodbye, Ada!", "data": expected_data}


@pytest.mark.parametrize(
    "event",
    [
        {"name": "X"},
        {"name": "X", "nested": {"list": [1, {"deep": True}]}},
        {"name": "X", "count": 3, "ratio": 0.5, "empty": None},
    ],
)
@pytest.mark.parametrize("handler", [hello, goodbye])
def test_data_field_is_structurally_equal_to_input(handler, event):
    original = copy.deepcopy(event)

    result = handler(event)

    assert result["data"] == original
    assert event == original


@pytest.mark.parametrize(
    "handler, expected", [(hello, "Hello, !"), (goodbye, "Goodbye, !")]
)
def test_missing_name_produces_empty_interpolation(handler, expected):
    result = handler({"other": "value"})

    assert result == {"msg": expected, "data": {"other": "value"}}


def test_null_name_produces_empty_interpolation():
    assert hello({"name": None})["msg"] == "Hello, !"


def test_non_string_name_is_rendered_with_str():
    assert hello({"name": 42})["msg"] == "Hello, 42!"


def test_format_name():
    assert format_name({"name": "Ada"}) == "Ada"
    assert format_name({}) == ""
