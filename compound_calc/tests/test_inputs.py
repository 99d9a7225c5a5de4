from __future__ import annotations

import pytest

from compound_calc.core.inputs import parse_number_input


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1000", 1000),
        ("007", 7),
        ("", 0),
        ("0", 0),
        ("000", 0),
        ("12abc", 12),
        ("1.9", 1),
        ("-5", -5),
    ],
)
def test_whole_number_fields(text, expected):
    assert parse_number_input(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("7", 7.0),
        (".5", 0.5),
        ("0.5", 0.5),
        ("007.25", 7.25),
        ("6.", 6.0),
        ("1e3", 1000.0),
        ("", 0.0),
    ],
)
def test_decimal_fields(text, expected):
    assert parse_number_input(text, allow_decimals=True) == expected


@pytest.mark.parametrize("text", ["abc", "$100", "-", "."])
def test_text_without_a_number_is_ignored(text):
    assert parse_number_input(text) is None


def test_lone_decimal_point_reads_as_zero_for_decimal_fields():
    assert parse_number_input(".", allow_decimals=True) == 0.0
