from decimal import Decimal

from hr_attendance.reports.formatting import format_currency, format_minutes, truncate


def test_format_minutes():
    assert format_minutes(3813) == "63:33"
    assert format_minutes(5) == "0:05"
    assert format_minutes(0) == "0:00"


def test_format_currency():
    assert format_currency(Decimal("2.5")) == "S/. 2.50"
    assert format_currency(Decimal("100"), "$") == "$ 100.00"


def test_truncate():
    assert truncate("JUAN CARLOS PEREZ GOMEZ", 10) == "JUAN CARLO"
    assert truncate("", 10) == ""
