"""Y-axis tick values for the balance chart."""

from __future__ import annotations

import math
from typing import List


def ticks(max_value: float, tick_count: int = 5) -> List[float]:
    """Return ``tick_count`` evenly spaced ticks from 0 with a rounded-up step."""
    if tick_count < 2:
        raise ValueError("tick_count must be at least 2")
    if max_value <= 0:
        return [0] * tick_count

    rough_step = max_value / (tick_count - 1)
    magnitude = 10 ** math.floor(math.log10(rough_step))
    step = math.ceil(rough_step / magnitude) * magnitude
    return [i * step for i in range(tick_count)]
