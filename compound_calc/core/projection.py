from __future__ import annotations

import logging
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class ProjectionInput(BaseModel):
    """Calculator parameters for one projection run."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    principal: float = Field(ge=0)
    annual_rate_percent: float = Field(ge=0)  # 7 means 7%
    years: int = Field(ge=0)
    compounds_per_year: int = Field(ge=1)
    contribution_amount: float = Field(ge=0)
    contributions_per_year: int = Field(ge=1)


class YearSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    starting_balance: float
    yearly_contribution: float
    yearly_interest: float
    cumulative_contributions: float
    cumulative_interest: float
    ending_balance: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    snapshots: Tuple[YearSnapshot, ...]
    final_balance: float


def project(params: ProjectionInput) -> ProjectionResult:
    """
    Build the year-by-year balance table for years 0..params.years (inclusive).

    Order of operations (per compounding sub-period):
      1) Add this sub-period's share of the yearly contribution.
      2) Earn interest on the balance including that contribution.

    Year 0 runs the full sub-period loop too, so its ending balance already
    includes one year of contributions and interest.
    """
    current_balance = float(params.principal)
    cumulative_contributions = 0.0
    cumulative_interest = 0.0

    period_rate = (params.annual_rate_percent / 100) / params.compounds_per_year

    snapshots: List[YearSnapshot] = []
    for year in range(params.years + 1):
        starting_balance = current_balance
        yearly_contribution = params.contribution_amount * params.contributions_per_year
        period_contribution = yearly_contribution / params.compounds_per_year
        yearly_interest = 0.0

        for _ in range(params.compounds_per_year):
            # contribution earns interest within the same sub-period
            interest = (current_balance + period_contribution) * period_rate
            yearly_interest += interest
            current_balance += period_contribution + interest

        cumulative_contributions += yearly_contribution
        cumulative_interest += yearly_interest

        snapshots.append(
            YearSnapshot(
                year=year,
                starting_balance=starting_balance,
                yearly_contribution=yearly_contribution,
                yearly_interest=yearly_interest,
                cumulative_contributions=cumulative_contributions,
                cumulative_interest=cumulative_interest,
                ending_balance=current_balance,
            )
        )

    logger.debug(
        "projected %d years at %.4f%% (%d periods/yr): final balance %.2f",
        params.years,
        params.annual_rate_percent,
        params.compounds_per_year,
        current_balance,
    )
    return ProjectionResult(snapshots=tuple(snapshots), final_balance=current_balance)


__all__ = [
    "ProjectionInput",
    "YearSnapshot",
    "ProjectionResult",
    "project",
]
