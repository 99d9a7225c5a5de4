"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from compound_calc import __version__
from compound_calc.core.presentation import chart_points, summarize, tick_labels, ticks_for
from compound_calc.core.projection import project
from compound_calc.core.validation import check_result, validate_projection_input
from compound_calc.errors import InvalidDomainError
from compound_calc.schemas.health import PingResponse
from compound_calc.schemas.projection import (
    COMPOUND_FREQUENCIES,
    CONTRIBUTION_FREQUENCIES,
    DefaultsResponse,
    FrequencyOption,
    ProjectionRequest,
    ProjectionResponse,
    YearRow,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(InvalidDomainError)
def _handle_invalid_domain(exc: InvalidDomainError):
    """Convert rejected calculator inputs into JSON responses."""
    logger.warning("rejected projection input: %s", exc)
    return jsonify({"detail": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong", version=__version__)
    return jsonify(response.model_dump())


@api_bp.get("/defaults")
def defaults() -> Any:
    """Starting values and frequency choices for the calculator form."""
    response = DefaultsResponse(
        inputs=ProjectionRequest(),
        compoundFrequencies=[FrequencyOption(label=label, value=value) for label, value in COMPOUND_FREQUENCIES],
        contributionFrequencies=[
            FrequencyOption(label=label, value=value) for label, value in CONTRIBUTION_FREQUENCIES
        ],
    )
    return jsonify(response.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Recompute the whole projection for one set of calculator inputs."""
    raw_payload = request.get_json(force=True, silent=False)
    params = validate_projection_input(
        raw_payload,
        max_years=current_app.config["MAX_YEARS"],
        max_periods_per_year=current_app.config["MAX_PERIODS_PER_YEAR"],
        max_rate_percent=current_app.config["MAX_RATE_PERCENT"],
        max_amount=current_app.config["MAX_AMOUNT"],
    )
    logger.info(
        "projection: principal=%s rate=%s%% years=%d compounds=%d contribution=%s x %d",
        params.principal,
        params.annual_rate_percent,
        params.years,
        params.compounds_per_year,
        params.contribution_amount,
        params.contributions_per_year,
    )

    result = project(params)
    check_result(result)
    points = chart_points(params, result)
    axis_ticks = ticks_for(points)

    response = ProjectionResponse(
        input=ProjectionRequest.from_input(params),
        rows=[YearRow.from_snapshot(snap) for snap in result.snapshots],
        chart=points,
        summary=summarize(result),
        yAxisTicks=axis_ticks,
        yAxisLabels=tick_labels(axis_ticks),
    )
    return jsonify(response.model_dump())
