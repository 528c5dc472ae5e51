# backend/forecasting/records.py
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(frozen=True)
class ForecastInput:
    """
    One category's inputs for a single forecast run.

    last_year: 12 monthly actuals for year N-1 (index 0 = January)
    current_year_to_date: 12 monthly actuals for year N, 0 after the cutoff
    budget: 12 monthly budget values for year N
    as_of_month: last month (1-12) treated as actual
    """
    category: str
    last_year: Sequence[float] = field(default_factory=list)
    current_year_to_date: Sequence[float] = field(default_factory=list)
    budget: Sequence[float] = field(default_factory=list)
    as_of_month: int = 1


@dataclass(frozen=True)
class ForecastResult:
    category: str
    month: int
    forecast_value: float
    budget_value: float
    last_month_value: float
    last_year_value: float
    variance: float
    variance_percent: float


@dataclass(frozen=True)
class ActualRecord:
    category: str
    month: int
    year: int
    value: float


@dataclass(frozen=True)
class BudgetRecord:
    # budgets carry no year; they are treated as the target year's plan
    category: str
    month: int
    value: float


@dataclass(frozen=True)
class MonthSummary:
    month: int
    total_forecast: float
    total_budget: float
    variance: float
    variance_percent: float
