"""Dollar formatting for table cells, summary totals and axis labels."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext


def _quantize(value: float, places: str) -> Decimal:
    # Decimal(float) is exact, so halves round away from zero as in the browser.
    # 400 digits holds the integer part of any finite float.
    with localcontext() as ctx:
        ctx.prec = 400
        return Decimal(value).quantize(Decimal(places), rounding=ROUND_HALF_UP)


def format_currency(value: float) -> str:
    """Whole-dollar amount with thousands separators, e.g. ``$61,747``."""
    amount = _quantize(value, "1")
    sign = "-" if amount < 0 else ""
    return f"{sign}${amount.copy_abs():,}"


def format_compact(value: float) -> str:
    """Short axis label: ``$1.2M``, ``$3.4K`` or ``$500``."""
    if value >= 1e6:
        return f"${_quantize(value / 1e6, '0.1')}M"
    if value >= 1e3:
        return f"${_quantize(value / 1e3, '0.1')}K"
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"${value}"
