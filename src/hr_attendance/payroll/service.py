from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from ..biometric.model import ParsedReport
from .calculator.base import DeductionCalculator
from .calculator.standard_calculator import StandardDeductionCalculator
from .model import DeductionSummary
from .policy import DeductionPolicy

logger = logging.getLogger(__name__)


class DeductionService:
    """Apply a DeductionPolicy to every record of a ParsedReport.

    Pure and deterministic: no I/O, the same (report, policy) gives the same summary.
    """

    def __init__(
        self,
        policy: Optional[DeductionPolicy] = None,
        *,
        calculator: Optional[DeductionCalculator] = None,
    ):
        self._policy = policy or DeductionPolicy()
        self._calculator = calculator or StandardDeductionCalculator()

    @property
    def policy(self) -> DeductionPolicy:
        return self._policy

    def summarize(self, report: ParsedReport, *, policy: Optional[DeductionPolicy] = None) -> DeductionSummary:
        policy = policy or self._policy
        deductions = [self._calculator.calculate(record, policy) for record in report.records]

        total_tardy = sum((d.tardy_deduction for d in deductions), Decimal("0"))
        total_absence = sum((d.absence_deduction for d in deductions), Decimal("0"))
        total_early = sum((d.early_leave_deduction for d in deductions), Decimal("0"))

        # sorted() is stable, reverse=True included: equal totals keep file order.
        ordered = sorted(deductions, key=lambda d: d.total_deduction, reverse=True)

        summary = DeductionSummary(
            total_employees=len(deductions),
            employees_with_deductions=sum(1 for d in deductions if d.total_deduction > 0),
            total_tardy_minutes=sum(d.tardy_minutes for d in deductions),
            total_tardy_deduction=total_tardy,
            total_absences=sum(d.absences for d in deductions),
            total_absence_deduction=total_absence,
            total_early_leave_minutes=sum(d.early_leave_minutes for d in deductions),
            total_early_leave_deduction=total_early,
            grand_total_deduction=total_tardy + total_absence + total_early,
            deductions=tuple(ordered),
            per_record=tuple(deductions),
        )
        logger.debug(
            "Deductions computed: employees=%s with_deductions=%s total=%s",
            summary.total_employees,
            summary.employees_with_deductions,
            summary.grand_total_deduction,
        )
        return summary
