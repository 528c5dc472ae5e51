# backend/forecasting/aggregate.py
"""
Fan the per-category generator out over flat actual / budget records.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

import numpy as np

from forecasting.generator import generate_forecast
from forecasting.records import ActualRecord, BudgetRecord, ForecastInput, ForecastResult
from forecasting.series import MONTHS, to_float

logger = logging.getLogger(__name__)

DEFAULT_BUDGET_UPLIFT = 1.05


def _zeros() -> np.ndarray:
    return np.zeros(MONTHS, dtype=np.float64)


@dataclass
class _CategorySeries:
    last_year: np.ndarray = field(default_factory=_zeros)
    current: np.ndarray = field(default_factory=_zeros)
    budget: np.ndarray = field(default_factory=_zeros)


def _month_slot(month) -> int | None:
    try:
        m = int(month)
    except (TypeError, ValueError, OverflowError):
        return None
    if 1 <= m <= MONTHS:
        return m - 1
    return None


def aggregate_forecasts(
    actuals: Iterable[ActualRecord],
    budgets: Iterable[BudgetRecord],
    target_year: int,
    as_of_month: int,
) -> List[ForecastResult]:
    """
    Group records by category and run the generator once per category.

    Categories come from `actuals` only, in first-appearance order; a
    budget-only category is not forecast. When several rows land on the
    same (category, month, year) slot the last one wins. Use
    `sum_duplicate_actuals` beforehand if rows should be added up instead.
    """
    grouped: Dict[str, _CategorySeries] = {}
    skipped = 0

    for record in actuals:
        series = grouped.setdefault(record.category, _CategorySeries())
        slot = _month_slot(record.month)
        if slot is None:
            skipped += 1
            continue
        if record.year == target_year - 1:
            series.last_year[slot] = to_float(record.value)
        elif record.year == target_year:
            series.current[slot] = to_float(record.value)

    for record in budgets:
        series = grouped.get(record.category)
        if series is None:
            continue
        slot = _month_slot(record.month)
        if slot is None:
            skipped += 1
            continue
        series.budget[slot] = to_float(record.value)

    if skipped:
        logger.debug("Ignored %d record(s) with a month outside 1-12", skipped)

    results: List[ForecastResult] = []
    for category, series in grouped.items():
        results.extend(
            generate_forecast(
                ForecastInput(
                    category=category,
                    last_year=series.last_year,
                    current_year_to_date=series.current,
                    budget=series.budget,
                    as_of_month=as_of_month,
                )
            )
        )
    return results


def sum_duplicate_actuals(actuals: Iterable[ActualRecord]) -> List[ActualRecord]:
    """
    Collapse rows sharing (category, year, month) by adding their values.
    Labels are stripped of surrounding whitespace before matching.
    """
    totals: Dict[tuple, float] = {}
    for record in actuals:
        key = (str(record.category).strip(), record.year, record.month)
        totals[key] = totals.get(key, 0.0) + to_float(record.value)
    return [
        ActualRecord(category=category, month=month, year=year, value=value)
        for (category, year, month), value in totals.items()
    ]


def derive_budget(
    actuals: Iterable[ActualRecord],
    target_year: int,
    uplift: float = DEFAULT_BUDGET_UPLIFT,
) -> List[BudgetRecord]:
    """Budget proxy: last year's actuals scaled by `uplift`."""
    return [
        BudgetRecord(category=r.category, month=r.month, value=to_float(r.value) * uplift)
        for r in actuals
        if r.year == target_year - 1
    ]
