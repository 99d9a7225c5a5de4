"""Boundary checks that run before any projection is computed."""

from __future__ import annotations

import math
import sys
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError

from compound_calc.core.projection import ProjectionInput, ProjectionResult
from compound_calc.errors import InvalidDomainError
from compound_calc.schemas.projection import ProjectionRequest

DEFAULT_MAX_YEARS = 100
DEFAULT_MAX_PERIODS_PER_YEAR = 365
DEFAULT_MAX_RATE_PERCENT = 1000.0
DEFAULT_MAX_AMOUNT = 1e12

# headroom for the top chart tick, which can reach twice the largest balance
_BALANCE_CEILING = sys.float_info.max / 8


def _describe(exc: ValidationError) -> List[str]:
    messages: List[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "payload"
        messages.append(f"{location}: {error['msg']}")
    return messages


def parse_request(payload: Optional[Mapping[str, Any]]) -> ProjectionRequest:
    """Validate the wire payload, converting schema failures into InvalidDomainError."""
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise InvalidDomainError(["payload: expected a JSON object"])
    try:
        return ProjectionRequest.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidDomainError(_describe(exc)) from exc


def check_limits(
    request: ProjectionRequest,
    max_years: int = DEFAULT_MAX_YEARS,
    max_periods_per_year: int = DEFAULT_MAX_PERIODS_PER_YEAR,
    max_rate_percent: float = DEFAULT_MAX_RATE_PERCENT,
    max_amount: float = DEFAULT_MAX_AMOUNT,
) -> None:
    errors: List[str] = []
    if request.principal > max_amount:
        errors.append(f"principal: must be at most {max_amount:g}")
    if request.annualRatePercent > max_rate_percent:
        errors.append(f"annualRatePercent: must be at most {max_rate_percent:g}")
    if request.years > max_years:
        errors.append(f"years: must be at most {max_years}")
    if request.compoundsPerYear > max_periods_per_year:
        errors.append(f"compoundsPerYear: must be at most {max_periods_per_year}")
    if request.contributionAmount > max_amount:
        errors.append(f"contributionAmount: must be at most {max_amount:g}")
    if request.contributionsPerYear > max_periods_per_year:
        errors.append(f"contributionsPerYear: must be at most {max_periods_per_year}")
    if errors:
        raise InvalidDomainError(errors)


def check_result(result: ProjectionResult) -> None:
    """Reject projections whose balance overflowed the float range."""
    if not math.isfinite(result.final_balance) or result.final_balance > _BALANCE_CEILING:
        raise InvalidDomainError(["projection: balance exceeds the representable range"])


def validate_projection_input(
    payload: Optional[Mapping[str, Any]],
    *,
    max_years: int = DEFAULT_MAX_YEARS,
    max_periods_per_year: int = DEFAULT_MAX_PERIODS_PER_YEAR,
    max_rate_percent: float = DEFAULT_MAX_RATE_PERCENT,
    max_amount: float = DEFAULT_MAX_AMOUNT,
) -> ProjectionInput:
    """Turn a raw calculator payload into engine input or raise InvalidDomainError."""
    request = parse_request(payload)
    check_limits(
        request,
        max_years=max_years,
        max_periods_per_year=max_periods_per_year,
        max_rate_percent=max_rate_percent,
        max_amount=max_amount,
    )
    return request.to_input()
