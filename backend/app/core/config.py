import os
from dotenv import load_dotenv

load_dotenv()

API_NAME = os.getenv("API_NAME", "Branch Forecast API")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("API_CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()

# budget proxy when no budget rows are supplied (last year x uplift)
BUDGET_UPLIFT = float(os.getenv("FORECAST_BUDGET_UPLIFT", "1.05"))

CURRENCY_SYMBOL = os.getenv("CURRENCY_SYMBOL", "$")
