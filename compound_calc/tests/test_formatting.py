from __future__ import annotations

import pytest

from compound_calc.core.formatting import format_compact, format_currency


@pytest.mark.parametrize(
    "value, expected",
    [
        (61747.449365153232, "$61,747"),
        (999, "$999"),
        (0, "$0"),
        (0.5, "$1"),
        (2.5, "$3"),
        (1234567.89, "$1,234,568"),
        (-1234.5, "-$1,235"),
    ],
)
def test_format_currency(value, expected):
    assert format_currency(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_250_000, "$1.3M"),
        (2_000_000, "$2.0M"),
        (3400, "$3.4K"),
        (20000, "$20.0K"),
        (1000, "$1.0K"),
        (300, "$300"),
        (300.0, "$300"),
        (0, "$0"),
    ],
)
def test_format_compact(value, expected):
    assert format_compact(value) == expected


def test_float_sized_amounts_format_in_full():
    label = format_currency(1.5e308)

    assert label.startswith("$1")
    assert label.count(",") == 102
    assert "E" not in label
    assert len(label) > 400


def test_float_sized_amounts_compact_label():
    label = format_compact(1.5e308)

    assert label.startswith("$1")
    assert label.endswith("M")
