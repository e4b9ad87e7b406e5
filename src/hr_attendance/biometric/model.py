from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional, Sequence

from ..core.enums import Field
from ..core.exceptions import ValidationError

_COUNT_FIELDS = (
    "scheduled_minutes",
    "actual_minutes",
    "tardy_count",
    "tardy_minutes",
    "early_leave_count",
    "early_leave_minutes",
    "overtime_weekday_minutes",
    "overtime_holiday_minutes",
    "scheduled_days",
    "attended_days",
    "early_leave_days",
    "absences",
    "permissions",
)


@dataclass(frozen=True)
class ReportingPeriod:
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValidationError("Reporting period start must not be after its end")

    def label(self) -> str:
        return f"{self.start.isoformat()} al {self.end.isoformat()}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Per-employee attendance facts for one reporting period.

    ``employee_id`` is the internal roster key and stays ``None`` until the row
    is reconciled; ``document_id`` is the external join key read from the file.
    """

    employee_id: Optional[str]
    employee_name: str
    document_id: str
    department: str
    scheduled_minutes: int = 0
    actual_minutes: int = 0
    tardy_count: int = 0
    tardy_minutes: int = 0
    early_leave_count: int = 0
    early_leave_minutes: int = 0
    overtime_weekday_minutes: int = 0
    overtime_holiday_minutes: int = 0
    scheduled_days: int = 0
    attended_days: int = 0
    early_leave_days: int = 0
    absences: int = 0
    permissions: int = 0

    def __post_init__(self) -> None:
        for name in _COUNT_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValidationError(f"{name} must be a non-negative integer, got {value!r}")

    @property
    def matched(self) -> bool:
        return self.employee_id is not None

    @property
    def overtime_minutes(self) -> int:
        return self.overtime_weekday_minutes + self.overtime_holiday_minutes


@dataclass(frozen=True)
class AttendanceSummary:
    total_tardy_minutes: int = 0
    total_absences: int = 0
    total_early_leave_minutes: int = 0
    total_overtime_minutes: int = 0

    @classmethod
    def from_records(cls, records: Sequence[AttendanceRecord]) -> "AttendanceSummary":
        return cls(
            total_tardy_minutes=sum(r.tardy_minutes for r in records),
            total_absences=sum(r.absences for r in records),
            total_early_leave_minutes=sum(r.early_leave_minutes for r in records),
            total_overtime_minutes=sum(r.overtime_minutes for r in records),
        )


@dataclass(frozen=True)
class CellIssue:
    """A non-empty cell that could not be decoded and was read as zero."""

    row: int
    column: int
    field: Field
    raw_value: str


@dataclass(frozen=True)
class SchemaMapping:
    """Where each semantic field lives in the selected sheet.

    Data rows start right after ``header_row`` (``-1`` when no header was found).
    """

    header_row: int
    columns: Mapping[Field, int]
    strategy: str

    @property
    def first_data_row(self) -> int:
        return self.header_row + 1

    def column_of(self, field: Field) -> Optional[int]:
        return self.columns.get(field)


@dataclass(frozen=True)
class ParsedReport:
    period: ReportingPeriod
    records: tuple[AttendanceRecord, ...]
    summary: AttendanceSummary
    sheet_name: str = ""
    schema_strategy: str = ""
    cell_issues: tuple[CellIssue, ...] = ()

    @classmethod
    def build(
        cls,
        *,
        period: ReportingPeriod,
        records: Sequence[AttendanceRecord],
        sheet_name: str = "",
        schema_strategy: str = "",
        cell_issues: Sequence[CellIssue] = (),
    ) -> "ParsedReport":
        records = tuple(records)
        return cls(
            period=period,
            records=records,
            summary=AttendanceSummary.from_records(records),
            sheet_name=sheet_name,
            schema_strategy=schema_strategy,
            cell_issues=tuple(cell_issues),
        )

    @property
    def total_employees(self) -> int:
        return len(self.records)

    @property
    def matched_employees(self) -> int:
        return sum(1 for r in self.records if r.matched)

    @property
    def unmatched_employees(self) -> int:
        return self.total_employees - self.matched_employees

    @property
    def unmatched_records(self) -> list[AttendanceRecord]:
        return [r for r in self.records if not r.matched]
