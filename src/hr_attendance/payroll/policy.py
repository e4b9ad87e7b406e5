from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping

from ..common.validators import require_decimal, require_non_negative
from ..core.constants import (
    DEFAULT_ABSENCE_DAY_RATE,
    DEFAULT_EARLY_LEAVE_MINUTE_RATE,
    DEFAULT_MAX_DEDUCTION_PERCENT,
    DEFAULT_TARDY_MINUTE_RATE,
    DEFAULT_TOLERANCE_MINUTES,
)
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class DeductionPolicy:
    """Monetary deduction rules, in the configured currency.

    ``tolerance_minutes`` is granted once per tardy occurrence.
    ``max_deduction_percent`` is advisory: it is validated and reported but no
    computation clamps to it.
    """

    tardy_minute_rate: Decimal = DEFAULT_TARDY_MINUTE_RATE
    absence_day_rate: Decimal = DEFAULT_ABSENCE_DAY_RATE
    early_leave_minute_rate: Decimal = DEFAULT_EARLY_LEAVE_MINUTE_RATE
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    max_deduction_percent: Decimal = DEFAULT_MAX_DEDUCTION_PERCENT

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "tardy_minute_rate", require_decimal(self.tardy_minute_rate, "tardy_minute_rate"))
        object.__setattr__(self, "absence_day_rate", require_decimal(self.absence_day_rate, "absence_day_rate"))
        object.__setattr__(
            self, "early_leave_minute_rate", require_decimal(self.early_leave_minute_rate, "early_leave_minute_rate")
        )
        object.__setattr__(
            self,
            "max_deduction_percent",
            require_decimal(self.max_deduction_percent, "max_deduction_percent", maximum=Decimal("100")),
        )
        try:
            tolerance = int(self.tolerance_minutes)
        except (TypeError, ValueError):
            raise ValidationError("tolerance_minutes must be an integer") from None
        object.__setattr__(self, "tolerance_minutes", require_non_negative(tolerance, "tolerance_minutes"))

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> "DeductionPolicy":
        """Build a policy from config/form values; blank or missing keys keep defaults."""
        return cls().with_overrides(values)

    def with_overrides(self, values: Mapping[str, Any] | None) -> "DeductionPolicy":
        merged = {
            "tardy_minute_rate": self.tardy_minute_rate,
            "absence_day_rate": self.absence_day_rate,
            "early_leave_minute_rate": self.early_leave_minute_rate,
            "tolerance_minutes": self.tolerance_minutes,
            "max_deduction_percent": self.max_deduction_percent,
        }
        merged.update({k: v for k, v in (values or {}).items() if k in merged and v not in (None, "")})
        return DeductionPolicy(**merged)
