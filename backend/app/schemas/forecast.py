from pydantic import BaseModel, Field
from typing import List, Optional


class ActualRow(BaseModel):
    category: str = Field(..., min_length=1)
    month: int = Field(..., ge=1, le=12)
    year: int
    value: float = 0.0


class BudgetRow(BaseModel):
    category: str = Field(..., min_length=1)
    month: int = Field(..., ge=1, le=12)
    value: float = 0.0


class ForecastRequest(BaseModel):
    category: str = Field(..., min_length=1)
    last_year: List[float] = Field(default_factory=list, max_length=12)
    current_year_to_date: List[float] = Field(default_factory=list, max_length=12)
    budget: List[float] = Field(default_factory=list, max_length=12)
    as_of_month: int = Field(..., ge=1, le=12)


class AggregateRequest(BaseModel):
    actuals: List[ActualRow]
    budgets: Optional[List[BudgetRow]] = Field(
        None, description="Omit to derive the budget from last year's actuals"
    )
    target_year: int
    as_of_month: Optional[int] = Field(None, ge=1, le=12)
    sum_duplicates: bool = False


class ForecastPoint(BaseModel):
    category: str
    month: int = Field(..., ge=1, le=12)
    month_label: str = ""
    forecast_value: float
    budget_value: float
    last_month_value: float
    last_year_value: float
    variance: float
    variance_percent: float


class OverrideRequest(BaseModel):
    point: ForecastPoint
    forecast_value: float


class MonthSummaryOut(BaseModel):
    month: int
    total_forecast: float
    total_budget: float
    variance: float
    variance_percent: float
    formatted_forecast: str
    formatted_budget: str
    formatted_variance_percent: str


class ForecastResponse(BaseModel):
    results: List[ForecastPoint]


class AggregateResponse(BaseModel):
    results: List[ForecastPoint]
    as_of_month: int
    summary: Optional[MonthSummaryOut] = None
    note: str | None = None
