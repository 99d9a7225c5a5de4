"""Shape a projection into chart points, summary totals and axis ticks."""

from __future__ import annotations

import math
from typing import List

from compound_calc.core.formatting import format_compact, format_currency
from compound_calc.core.projection import ProjectionInput, ProjectionResult
from compound_calc.core.ticks import ticks
from compound_calc.schemas.projection import ChartPoint, ProjectionSummary


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded toward +infinity (JavaScript Math.round)."""
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def chart_points(params: ProjectionInput, result: ProjectionResult) -> List[ChartPoint]:
    """Stacked series: initial principal, cumulative contributions, cumulative interest."""
    principal = round_half_up(params.principal)
    return [
        ChartPoint(
            year=snap.year,
            principal=principal,
            contributions=round_half_up(snap.cumulative_contributions),
            interest=round_half_up(snap.cumulative_interest),
            total=round_half_up(snap.ending_balance),
        )
        for snap in result.snapshots
    ]


def summarize(result: ProjectionResult) -> ProjectionSummary:
    last = result.snapshots[-1]
    return ProjectionSummary(
        finalBalance=result.final_balance,
        totalContributions=last.cumulative_contributions,
        totalInterest=last.cumulative_interest,
        finalBalanceLabel=format_currency(result.final_balance),
        totalContributionsLabel=format_currency(last.cumulative_contributions),
        totalInterestLabel=format_currency(last.cumulative_interest),
    )


def ticks_for(points: List[ChartPoint], tick_count: int = 5) -> List[float]:
    """Axis ticks sized to the tallest stacked bar."""
    max_total = max((point.total for point in points), default=0)
    return ticks(max_total, tick_count)


def tick_labels(values: List[float]) -> List[str]:
    return [format_compact(value) for value in values]
