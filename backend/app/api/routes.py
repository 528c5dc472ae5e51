import logging
from dataclasses import asdict

from fastapi import APIRouter
from app.core.config import BUDGET_UPLIFT
from app.schemas.forecast import (
    AggregateRequest,
    AggregateResponse,
    ForecastPoint,
    ForecastRequest,
    ForecastResponse,
    MonthSummaryOut,
    OverrideRequest,
)
from app.utils.date_utils import current_month, short_month_name
from app.utils.formatting import format_currency, format_percent

from forecasting.aggregate import aggregate_forecasts, derive_budget, sum_duplicate_actuals
from forecasting.generator import generate_forecast, override_forecast, summarize_month
from forecasting.records import ActualRecord, BudgetRecord, ForecastInput, ForecastResult


logger = logging.getLogger(__name__)

router = APIRouter()


def _to_point(result: ForecastResult) -> ForecastPoint:
    return ForecastPoint(month_label=short_month_name(result.month), **asdict(result))


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/forecast", response_model=ForecastResponse)
def forecast(req: ForecastRequest):
    """
    Forecast a single category from its three monthly series.
    """
    results = generate_forecast(
        ForecastInput(
            category=req.category,
            last_year=req.last_year,
            current_year_to_date=req.current_year_to_date,
            budget=req.budget,
            as_of_month=req.as_of_month,
        )
    )
    logger.info(
        "Generated forecast",
        extra={"extra_data": {
            "category": req.category,
            "as_of_month": req.as_of_month,
            "results": len(results),
        }},
    )
    return ForecastResponse(results=[_to_point(r) for r in results])


@router.post("/forecast/aggregate", response_model=AggregateResponse)
def forecast_aggregate(req: AggregateRequest):
    """
    Forecast every category found in the actuals for `target_year`.
    Budgets default to last year's actuals x FORECAST_BUDGET_UPLIFT.
    """
    as_of_month = req.as_of_month or current_month()

    if not req.actuals:
        return AggregateResponse(
            results=[],
            as_of_month=as_of_month,
            note="No actuals data found. Please upload data first.",
        )

    actuals = [
        ActualRecord(category=a.category, month=a.month, year=a.year, value=a.value)
        for a in req.actuals
    ]
    if req.sum_duplicates:
        actuals = sum_duplicate_actuals(actuals)

    if req.budgets is None:
        budgets = derive_budget(actuals, req.target_year, BUDGET_UPLIFT)
        note = f"Budget derived from {req.target_year - 1} actuals x {BUDGET_UPLIFT:g}."
    else:
        budgets = [
            BudgetRecord(category=b.category, month=b.month, value=b.value)
            for b in req.budgets
        ]
        note = None

    results = aggregate_forecasts(actuals, budgets, req.target_year, as_of_month)
    summary = summarize_month(results, as_of_month)

    logger.info(
        "Generated aggregate forecast",
        extra={"extra_data": {
            "target_year": req.target_year,
            "as_of_month": as_of_month,
            "results": len(results),
        }},
    )

    return AggregateResponse(
        results=[_to_point(r) for r in results],
        as_of_month=as_of_month,
        summary=MonthSummaryOut(
            formatted_forecast=format_currency(summary.total_forecast),
            formatted_budget=format_currency(summary.total_budget),
            formatted_variance_percent=format_percent(summary.variance_percent),
            **asdict(summary),
        ),
        note=note,
    )


@router.post("/forecast/override", response_model=ForecastPoint)
def forecast_override(req: OverrideRequest):
    point = req.point
    adjusted = override_forecast(
        ForecastResult(
            category=point.category,
            month=point.month,
            forecast_value=point.forecast_value,
            budget_value=point.budget_value,
            last_month_value=point.last_month_value,
            last_year_value=point.last_year_value,
            variance=point.variance,
            variance_percent=point.variance_percent,
        ),
        req.forecast_value,
    )
    return _to_point(adjusted)
