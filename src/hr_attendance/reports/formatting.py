from __future__ import annotations

from decimal import Decimal

from ..core.constants import DEFAULT_CURRENCY_SYMBOL


def format_minutes(minutes: int) -> str:
    """Minutes as ``H:MM`` (hours are not wrapped at 24): 3813 -> ``63:33``."""

    minutes = max(int(minutes or 0), 0)
    return f"{minutes // 60}:{minutes % 60:02d}"


def format_currency(amount: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    return f"{symbol} {Decimal(amount):.2f}"


def truncate(text: str, width: int) -> str:
    return (text or "")[:width]
