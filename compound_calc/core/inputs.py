"""Coercion of raw text-box values into numbers."""

from __future__ import annotations

import re
from typing import Optional, Union

_INTEGER_PREFIX = re.compile(r"\s*([+-]?\d+)")
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number_input(text: str, allow_decimals: bool = False) -> Optional[Union[int, float]]:
    """
    Parse what a user typed into a numeric field.

    Leading zeros are dropped and an empty field reads as 0. Only the numeric
    prefix counts, so "12abc" is 12 and "1.9" without decimals is 1.
    Returns None when the text has no numeric prefix at all.
    """
    value = text.lstrip("0")
    if value == "":
        value = "0"
    if allow_decimals and value.startswith("."):
        value = "0" + value

    pattern = _DECIMAL_PREFIX if allow_decimals else _INTEGER_PREFIX
    match = pattern.match(value)
    if match is None:
        return None
    if allow_decimals:
        return float(match.group(1))
    return int(match.group(1))
