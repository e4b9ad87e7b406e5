from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class EmployeeDeduction:
    employee_id: Optional[str]
    employee_name: str
    document_id: str
    tardy_minutes: int
    tardy_deduction: Decimal
    absences: int
    absence_deduction: Decimal
    early_leave_minutes: int
    early_leave_deduction: Decimal
    total_deduction: Decimal


@dataclass(frozen=True)
class DeductionSummary:
    total_employees: int
    employees_with_deductions: int
    total_tardy_minutes: int
    total_tardy_deduction: Decimal
    total_absences: int
    total_absence_deduction: Decimal
    total_early_leave_minutes: int
    total_early_leave_deduction: Decimal
    grand_total_deduction: Decimal
    deductions: tuple[EmployeeDeduction, ...]
    # same entries in file order, one per record
    per_record: tuple[EmployeeDeduction, ...] = ()

    @property
    def with_deductions(self) -> list[EmployeeDeduction]:
        return [d for d in self.deductions if d.total_deduction > 0]
