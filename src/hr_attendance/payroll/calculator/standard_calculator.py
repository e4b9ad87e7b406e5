from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...biometric.model import AttendanceRecord
from ..model import EmployeeDeduction
from ..policy import DeductionPolicy
from .base import DeductionCalculator

CENTS = Decimal("0.01")


def to_cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class StandardDeductionCalculator(DeductionCalculator):
    """Standard rule: tolerance per tardy occurrence, flat rates, no tolerance on early leave."""

    def effective_tardy_minutes(self, record: AttendanceRecord, policy: DeductionPolicy) -> int:
        return max(0, record.tardy_minutes - record.tardy_count * policy.tolerance_minutes)

    def calculate(self, record: AttendanceRecord, policy: DeductionPolicy) -> EmployeeDeduction:
        tardy_minutes = self.effective_tardy_minutes(record, policy)

        tardy = to_cents(tardy_minutes * policy.tardy_minute_rate)
        absence = to_cents(record.absences * policy.absence_day_rate)
        early = to_cents(record.early_leave_minutes * policy.early_leave_minute_rate)

        return EmployeeDeduction(
            employee_id=record.employee_id,
            employee_name=record.employee_name,
            document_id=record.document_id,
            tardy_minutes=tardy_minutes,
            tardy_deduction=tardy,
            absences=record.absences,
            absence_deduction=absence,
            early_leave_minutes=record.early_leave_minutes,
            early_leave_deduction=early,
            total_deduction=tardy + absence + early,
        )
