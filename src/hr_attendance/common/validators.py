from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.exceptions import ValidationError


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or value < 0:
        raise ValidationError(f"{field_name} must be a non-negative integer")
    return value


def require_decimal(value: Any, field_name: str, *, minimum: Decimal = Decimal("0"), maximum: Decimal | None = None) -> Decimal:
    """Coerce ``value`` to Decimal and check it lies in [minimum, maximum]."""

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} is not a valid number") from None
    if not amount.is_finite() or amount < minimum:
        raise ValidationError(f"{field_name} must be >= {minimum}")
    if maximum is not None and amount > maximum:
        raise ValidationError(f"{field_name} must be <= {maximum}")
    return amount
