# backend/forecasting/series.py
"""
Monthly series helpers used by the forecast generator.

A MonthlySeries is a float array of exactly 12 values, index 0 = January.
Unset months are 0.0, so "no data" and "actual zero" look the same.
"""

import logging
import math
from typing import Any, Sequence

import numpy as np

logger = logging.getLogger(__name__)

MONTHS = 12

# Weights for the most recent actual months, most recent first.
RECENCY_WEIGHTS = (0.4, 0.3, 0.2, 0.1)

# seasonal, seasonal-adjusted recent average, budget anchored
BLEND_WEIGHTS = (0.4, 0.3, 0.3)

BUDGET_FLOOR = 0.5
BUDGET_CEILING = 2.0


def to_float(value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def to_monthly_series(values: Sequence[Any] | None) -> np.ndarray:
    """
    values: any sequence of numbers (may be short, long or contain None)
    returns: float64 array of length 12, zero-padded / truncated
    """
    series = np.zeros(MONTHS, dtype=np.float64)
    if values is None:
        return series
    for i, value in enumerate(list(values)[:MONTHS]):
        series[i] = to_float(value)
    return series


def clamp_month(month: Any, low: int = 0) -> int:
    try:
        m = int(month)
    except (TypeError, ValueError, OverflowError):
        return low
    return max(low, min(MONTHS, m))


def seasonal_indices(last_year: np.ndarray) -> np.ndarray:
    """Normalize last year's shape so the 12 indices sum to 12."""
    total = float(np.sum(last_year))
    if total == 0:
        logger.debug("Last year total is zero; using flat seasonal index")
        return np.full(MONTHS, 1.0 / MONTHS, dtype=np.float64)
    return last_year / total * MONTHS


def trend_factor(current_ytd: np.ndarray, last_year_ytd: np.ndarray) -> float:
    current_total = float(np.sum(current_ytd))
    last_year_total = float(np.sum(last_year_ytd))
    if last_year_total == 0:
        return 1.0
    return current_total / last_year_total


def weighted_average(values: Sequence[float], weights: Sequence[float] = RECENCY_WEIGHTS) -> float:
    """
    Position-for-position weighted mean over the overlapping length of
    `values` and `weights`. Returns 0 when the applied weights sum to 0.
    """
    n = min(len(values), len(weights))
    total = 0.0
    weight_sum = 0.0
    for i in range(n):
        total += float(values[i]) * weights[i]
        weight_sum += weights[i]
    return total / weight_sum if weight_sum > 0 else 0.0


def round2(value: float) -> float:
    # half-up at the second decimal; -0.125 -> -0.12
    scaled = to_float(value) * 100 + 0.5
    if not math.isfinite(scaled):
        return 0.0
    return math.floor(scaled) / 100
