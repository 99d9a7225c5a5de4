"""Data contracts for the projection endpoint."""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compound_calc.core.inputs import parse_number_input
from compound_calc.core.projection import ProjectionInput, YearSnapshot

DEFAULT_INPUTS = {
    "principal": 1000,
    "annualRatePercent": 7,
    "years": 20,
    "compoundsPerYear": 1,
    "contributionAmount": 100,
    "contributionsPerYear": 12,
}

COMPOUND_FREQUENCIES = [
    ("Annually", 1),
    ("Semi-Annually", 2),
    ("Quarterly", 4),
    ("Monthly", 12),
    ("Daily", 365),
]

CONTRIBUTION_FREQUENCIES = [
    ("Annually", 1),
    ("Semi-Annually", 2),
    ("Quarterly", 4),
    ("Monthly", 12),
    ("Weekly", 52),
]


def _reject_bool(value: Any) -> None:
    # JSON true/false would otherwise read as 1/0
    if isinstance(value, bool):
        raise ValueError("expected a number, not a boolean")


class ProjectionRequest(BaseModel):
    """Calculator inputs as sent by the form; text-box strings are accepted."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    principal: float = Field(DEFAULT_INPUTS["principal"], ge=0, description="Initial principal amount.")
    annualRatePercent: float = Field(
        DEFAULT_INPUTS["annualRatePercent"],
        ge=0,
        description="Annual interest rate in percent (e.g. 7 for 7%).",
    )
    years: int = Field(DEFAULT_INPUTS["years"], ge=0, description="Number of whole years to project.")
    compoundsPerYear: int = Field(DEFAULT_INPUTS["compoundsPerYear"], ge=1)
    contributionAmount: float = Field(
        DEFAULT_INPUTS["contributionAmount"],
        ge=0,
        description="Amount added at each contribution event.",
    )
    contributionsPerYear: int = Field(DEFAULT_INPUTS["contributionsPerYear"], ge=1)

    @field_validator(
        "principal",
        "years",
        "compoundsPerYear",
        "contributionAmount",
        "contributionsPerYear",
        mode="before",
    )
    @classmethod
    def _parse_whole_number_text(cls, value: Any) -> Any:
        _reject_bool(value)
        if isinstance(value, str):
            parsed = parse_number_input(value)
            if parsed is None:
                raise ValueError(f"{value!r} is not a number")
            return parsed
        return value

    @field_validator("annualRatePercent", mode="before")
    @classmethod
    def _parse_decimal_text(cls, value: Any) -> Any:
        _reject_bool(value)
        if isinstance(value, str):
            parsed = parse_number_input(value, allow_decimals=True)
            if parsed is None:
                raise ValueError(f"{value!r} is not a number")
            return parsed
        return value

    @classmethod
    def from_input(cls, params: ProjectionInput) -> "ProjectionRequest":
        return cls(
            principal=params.principal,
            annualRatePercent=params.annual_rate_percent,
            years=params.years,
            compoundsPerYear=params.compounds_per_year,
            contributionAmount=params.contribution_amount,
            contributionsPerYear=params.contributions_per_year,
        )

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            principal=self.principal,
            annual_rate_percent=self.annualRatePercent,
            years=self.years,
            compounds_per_year=self.compoundsPerYear,
            contribution_amount=self.contributionAmount,
            contributions_per_year=self.contributionsPerYear,
        )


class YearRow(BaseModel):
    """Single row of the year-by-year table."""

    year: int = Field(..., ge=0)
    startingBalance: float
    yearlyContribution: float
    yearlyInterest: float
    cumulativeContributions: float
    cumulativeInterest: float
    endingBalance: float

    @classmethod
    def from_snapshot(cls, snap: YearSnapshot) -> "YearRow":
        return cls(
            year=snap.year,
            startingBalance=snap.starting_balance,
            yearlyContribution=snap.yearly_contribution,
            yearlyInterest=snap.yearly_interest,
            cumulativeContributions=snap.cumulative_contributions,
            cumulativeInterest=snap.cumulative_interest,
            endingBalance=snap.ending_balance,
        )


class ChartPoint(BaseModel):
    """One stacked bar; all values rounded to whole dollars."""

    year: int
    principal: int
    contributions: int
    interest: int
    total: int


class ProjectionSummary(BaseModel):
    finalBalance: float
    totalContributions: float
    totalInterest: float
    finalBalanceLabel: str
    totalContributionsLabel: str
    totalInterestLabel: str


class ProjectionResponse(BaseModel):
    """Everything the calculator page renders for one set of inputs."""

    input: ProjectionRequest
    rows: List[YearRow]
    chart: List[ChartPoint]
    summary: ProjectionSummary
    yAxisTicks: List[float]
    yAxisLabels: List[str]


class FrequencyOption(BaseModel):
    label: str
    value: int


class DefaultsResponse(BaseModel):
    inputs: ProjectionRequest
    compoundFrequencies: List[FrequencyOption]
    contributionFrequencies: List[FrequencyOption]
