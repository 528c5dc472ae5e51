from datetime import datetime, timezone

from app.utils.date_utils import current_month, month_name, short_month_name
from app.utils.formatting import format_currency, format_percent


def test_format_currency_whole_units() -> None:
    assert format_currency(1234.56) == "$1,235"
    assert format_currency(0) == "$0"
    assert format_currency(1_000_000) == "$1,000,000"


def test_format_currency_drops_sign() -> None:
    assert format_currency(-1234.4) == "$1,234"
    assert format_currency(250, symbol="CA$") == "CA$250"


def test_format_percent_sign() -> None:
    assert format_percent(5).startswith("+")
    assert "+" not in format_percent(-3)
    assert format_percent(0).startswith("+")
    assert format_percent(-3) == "-3.0%"


def test_format_percent_one_decimal() -> None:
    assert format_percent(10.456) == "+10.5%"


def test_month_name() -> None:
    assert month_name(1) == "January"
    assert month_name(6) == "June"
    assert month_name(12) == "December"
    assert month_name(0) == ""
    assert month_name(13) == ""


def test_short_month_name() -> None:
    assert short_month_name(1) == "Jan"
    assert short_month_name(12) == "Dec"
    assert short_month_name(0) == ""
    assert short_month_name(-1) == ""


def test_current_month_uses_given_clock() -> None:
    assert current_month(datetime(2026, 3, 31, 23, 0, tzinfo=timezone.utc)) == 3
    assert 1 <= current_month() <= 12
