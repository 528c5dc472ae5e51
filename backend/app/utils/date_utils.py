from datetime import datetime, timezone

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

SHORT_MONTH_NAMES = tuple(name[:3] for name in MONTH_NAMES)


def _lookup(table, month) -> str:
    if isinstance(month, bool) or not isinstance(month, int):
        return ""
    if 1 <= month <= len(table):
        return table[month - 1]
    return ""


def month_name(month: int) -> str:
    """1 -> "January"; anything outside 1-12 -> "" """
    return _lookup(MONTH_NAMES, month)


def short_month_name(month: int) -> str:
    return _lookup(SHORT_MONTH_NAMES, month)


def current_month(now: datetime | None = None) -> int:
    """Default as-of month: the server's current month in UTC."""
    now = now or datetime.now(timezone.utc)
    return now.month
