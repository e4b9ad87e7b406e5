from __future__ import annotations

from decimal import Decimal

import pytest

from hr_attendance.core.exceptions import ValidationError
from hr_attendance.payroll.policy import DeductionPolicy


def test_defaults():
    policy = DeductionPolicy()

    assert policy.tardy_minute_rate == Decimal("0.50")
    assert policy.early_leave_minute_rate == Decimal("0.50")
    assert policy.absence_day_rate == Decimal("100")
    assert policy.tolerance_minutes == 10
    assert policy.max_deduction_percent == Decimal("10")


def test_from_mapping_coerces_form_strings_and_keeps_defaults_for_blanks():
    policy = DeductionPolicy.from_mapping({"tardy_minute_rate": "0.75", "tolerance_minutes": "5", "absence_day_rate": ""})

    assert policy.tardy_minute_rate == Decimal("0.75")
    assert policy.tolerance_minutes == 5
    assert policy.absence_day_rate == Decimal("100")


def test_from_mapping_ignores_unknown_keys():
    assert DeductionPolicy.from_mapping({"salary": "1200"}) == DeductionPolicy()
    assert DeductionPolicy.from_mapping(None) == DeductionPolicy()


@pytest.mark.parametrize(
    "overrides",
    [
        {"tardy_minute_rate": "-1"},
        {"absence_day_rate": "abc"},
        {"tolerance_minutes": "-5"},
        {"tolerance_minutes": "diez"},
        {"max_deduction_percent": "150"},
        {"early_leave_minute_rate": "NaN"},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(ValidationError):
        DeductionPolicy.from_mapping(overrides)
