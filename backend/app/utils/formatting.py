import math

from app.core.config import CURRENCY_SYMBOL


def format_currency(value: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """
    Whole-unit magnitude with thousands separators: 1234.56 -> "$1,235".
    The sign is dropped; callers colour negatives themselves.
    """
    try:
        magnitude = abs(float(value))
    except (TypeError, ValueError):
        magnitude = 0.0
    if not math.isfinite(magnitude):
        magnitude = 0.0
    return f"{symbol}{math.floor(magnitude + 0.5):,}"


def format_percent(value: float) -> str:
    """One decimal, explicit "+" for values >= 0: 5 -> "+5.0%", -3 -> "-3.0%"."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        number = 0.0
    if not math.isfinite(number):
        number = 0.0
    sign = "+" if number >= 0 else ""
    return f"{sign}{number:.1f}%"
