"""Environment-driven settings loaded by the application factory."""

import os
from typing import List

from compound_calc.core.validation import (
    DEFAULT_MAX_AMOUNT,
    DEFAULT_MAX_PERIODS_PER_YEAR,
    DEFAULT_MAX_RATE_PERCENT,
    DEFAULT_MAX_YEARS,
)


def _origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    MAX_YEARS = int(os.environ.get("COMPOUND_CALC_MAX_YEARS", DEFAULT_MAX_YEARS))
    MAX_PERIODS_PER_YEAR = int(
        os.environ.get("COMPOUND_CALC_MAX_PERIODS_PER_YEAR", DEFAULT_MAX_PERIODS_PER_YEAR)
    )
    MAX_RATE_PERCENT = float(os.environ.get("COMPOUND_CALC_MAX_RATE_PERCENT", DEFAULT_MAX_RATE_PERCENT))
    MAX_AMOUNT = float(os.environ.get("COMPOUND_CALC_MAX_AMOUNT", DEFAULT_MAX_AMOUNT))
    CORS_ORIGINS = _origins(
        os.environ.get(
            "COMPOUND_CALC_CORS_ORIGINS",
            "http://localhost:5173,http://127.0.0.1:5173",
        )
    )
    LOG_LEVEL = os.environ.get("COMPOUND_CALC_LOG_LEVEL", "INFO")
