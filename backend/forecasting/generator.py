# backend/forecasting/generator.py
import logging
from dataclasses import replace
from typing import Iterable, List

from forecasting.records import ForecastInput, ForecastResult, MonthSummary
from forecasting.series import (
    BLEND_WEIGHTS,
    BUDGET_CEILING,
    BUDGET_FLOOR,
    MONTHS,
    RECENCY_WEIGHTS,
    clamp_month,
    round2,
    seasonal_indices,
    to_monthly_series,
    trend_factor,
    weighted_average,
)

logger = logging.getLogger(__name__)


def _variance_percent(variance: float, budget_value: float) -> float:
    return variance / budget_value * 100 if budget_value != 0 else 0.0


def generate_forecast(forecast_input: ForecastInput) -> List[ForecastResult]:
    """
    Produce 12 monthly forecast records for one category.

    Months up to and including `as_of_month` pass the actual through.
    Later months blend three projections:
      - last year's value scaled by the year-over-year trend
      - the weighted recent average shaped by last year's seasonality
      - the budget scaled by the trend
    and are clamped to [0.5x, 2x] budget whenever the budget is positive.
    """
    category = forecast_input.category
    last_year = to_monthly_series(forecast_input.last_year)
    current = to_monthly_series(forecast_input.current_year_to_date)
    budget = to_monthly_series(forecast_input.budget)
    as_of = clamp_month(forecast_input.as_of_month)

    indices = seasonal_indices(last_year)
    trend = trend_factor(current[:as_of], last_year[:as_of])

    recent = current[max(0, as_of - len(RECENCY_WEIGHTS)):as_of][::-1]
    recent_avg = weighted_average(recent, RECENCY_WEIGHTS)

    w_seasonal, w_recent, w_budget = BLEND_WEIGHTS
    results: List[ForecastResult] = []

    for month in range(1, MONTHS + 1):
        i = month - 1
        budget_value = float(budget[i])
        last_year_value = float(last_year[i])

        if month <= as_of:
            forecast_value = float(current[i])
        else:
            seasonal = last_year_value * trend
            seasonal_adjusted = recent_avg * float(indices[i])
            budget_anchored = budget_value * trend
            forecast_value = (
                w_seasonal * seasonal
                + w_recent * seasonal_adjusted
                + w_budget * budget_anchored
            )
            if budget_value > 0:
                forecast_value = max(
                    BUDGET_FLOOR * budget_value,
                    min(BUDGET_CEILING * budget_value, forecast_value),
                )

        if month == 1:
            # wrap to the prior December
            last_month_value = float(last_year[MONTHS - 1])
        elif month - 1 <= as_of:
            last_month_value = float(current[i - 1])
        else:
            last_month_value = float(last_year[i - 1])

        variance = forecast_value - budget_value
        results.append(
            ForecastResult(
                category=category,
                month=month,
                forecast_value=round2(forecast_value),
                budget_value=budget_value,
                last_month_value=last_month_value,
                last_year_value=last_year_value,
                variance=round2(variance),
                variance_percent=round2(_variance_percent(variance, budget_value)),
            )
        )

    logger.debug(
        "Forecast generated for %r (as_of=%d, trend=%.4f, recent_avg=%.2f)",
        category, as_of, trend, recent_avg,
    )
    return results


def override_forecast(result: ForecastResult, new_value: float) -> ForecastResult:
    """Manual adjustment of one forecast cell; variance fields follow the new value."""
    forecast_value = round2(new_value)
    variance = forecast_value - result.budget_value
    return replace(
        result,
        forecast_value=forecast_value,
        variance=round2(variance),
        variance_percent=round2(_variance_percent(variance, result.budget_value)),
    )


def summarize_month(results: Iterable[ForecastResult], month: int) -> MonthSummary:
    total_forecast = 0.0
    total_budget = 0.0
    for r in results:
        if r.month == month:
            total_forecast += r.forecast_value
            total_budget += r.budget_value
    variance = total_forecast - total_budget
    return MonthSummary(
        month=month,
        total_forecast=round2(total_forecast),
        total_budget=round2(total_budget),
        variance=round2(variance),
        variance_percent=round2(_variance_percent(variance, total_budget)),
    )
