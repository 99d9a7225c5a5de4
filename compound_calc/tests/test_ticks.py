from __future__ import annotations

import pytest

from compound_calc.core.ticks import ticks


def test_thousand_uses_rounded_up_step():
    values = ticks(1000, 5)

    assert values == [0, 300, 600, 900, 1200]
    assert values[1] >= 1000 / 4


def test_exact_power_of_ten_step_is_kept():
    assert ticks(400) == [0, 100, 200, 300, 400]


def test_top_tick_covers_the_maximum():
    values = ticks(61747)

    assert values == [0, 20000, 40000, 60000, 80000]
    assert values[-1] >= 61747


def test_zero_maximum_gives_all_zero_ticks():
    assert ticks(0) == [0, 0, 0, 0, 0]
    assert ticks(0, 3) == [0, 0, 0]


@pytest.mark.parametrize("max_value", [7, 58, 999, 12345, 2_000_001])
def test_ticks_are_ascending_from_zero(max_value):
    values = ticks(max_value, 6)

    assert len(values) == 6
    assert values[0] == 0
    assert all(b > a for a, b in zip(values, values[1:]))
    assert values[-1] >= max_value


def test_single_tick_is_rejected():
    with pytest.raises(ValueError):
        ticks(100, 1)
