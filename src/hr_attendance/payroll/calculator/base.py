from __future__ import annotations

from abc import ABC, abstractmethod

from ...biometric.model import AttendanceRecord
from ..model import EmployeeDeduction
from ..policy import DeductionPolicy


class DeductionCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll deductions)."""

    @abstractmethod
    def calculate(self, record: AttendanceRecord, policy: DeductionPolicy) -> EmployeeDeduction:
        raise NotImplementedError
