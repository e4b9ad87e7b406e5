from __future__ import annotations

from typing import Any, Callable, Sequence

from ..core.constants import MIN_IDENTIFIER_LENGTH
from ..core.enums import Field
from .decoders import cell_text, decode_count, decode_day_pair, decode_duration, decode_minutes, decode_name
from .model import AttendanceRecord, CellIssue, SchemaMapping

_DURATION_FIELDS = {
    Field.SCHEDULED_HOURS: "scheduled_minutes",
    Field.ACTUAL_HOURS: "actual_minutes",
    Field.OVERTIME_WEEKDAY: "overtime_weekday_minutes",
    Field.OVERTIME_HOLIDAY: "overtime_holiday_minutes",
}

_MINUTE_FIELDS = {
    Field.TARDY_MINUTES: "tardy_minutes",
    Field.EARLY_LEAVE_MINUTES: "early_leave_minutes",
}

_COUNT_FIELDS = {
    Field.TARDY_COUNT: "tardy_count",
    Field.EARLY_LEAVE_COUNT: "early_leave_count",
    Field.EARLY_LEAVE_DAYS: "early_leave_days",
    Field.ABSENCES: "absences",
    Field.PERMISSIONS: "permissions",
}


class RowParser:
    """Decode data rows into unmatched AttendanceRecords.

    Rows without a usable identifier (blank lines, section totals) are skipped.
    Cells that fail to decode become zero and are collected in ``issues``.
    """

    def __init__(self, mapping: SchemaMapping):
        self._mapping = mapping

    def parse(self, rows: Sequence[Sequence[Any]]) -> tuple[list[AttendanceRecord], list[CellIssue]]:
        records: list[AttendanceRecord] = []
        issues: list[CellIssue] = []

        for row_index in range(max(self._mapping.first_data_row, 0), len(rows)):
            record = self.parse_row(rows[row_index], row_index, issues)
            if record is not None:
                records.append(record)
        return records, issues

    def parse_row(self, row: Sequence[Any], row_index: int, issues: list[CellIssue]) -> AttendanceRecord | None:
        document_id = cell_text(self._cell(row, Field.DOCUMENT_ID))
        if len(document_id) < MIN_IDENTIFIER_LENGTH:
            return None

        values: dict[str, Any] = {}
        for field, attr in _DURATION_FIELDS.items():
            values[attr] = decode_duration(self._cell(row, field), self._reporter(issues, row_index, field))
        for field, attr in _MINUTE_FIELDS.items():
            values[attr] = decode_minutes(self._cell(row, field), self._reporter(issues, row_index, field))
        for field, attr in _COUNT_FIELDS.items():
            values[attr] = decode_count(self._cell(row, field), self._reporter(issues, row_index, field))

        scheduled_days, attended_days = decode_day_pair(
            self._cell(row, Field.DAYS_ATTENDED),
            self._reporter(issues, row_index, Field.DAYS_ATTENDED),
        )

        return AttendanceRecord(
            employee_id=None,
            employee_name=decode_name(self._cell(row, Field.NAME)),
            document_id=document_id,
            department=cell_text(self._cell(row, Field.DEPARTMENT)),
            scheduled_days=scheduled_days,
            attended_days=attended_days,
            **values,
        )

    def _cell(self, row: Sequence[Any], field: Field) -> Any:
        column = self._mapping.column_of(field)
        if column is None or column >= len(row):
            return None
        return row[column]

    def _reporter(self, issues: list[CellIssue], row_index: int, field: Field) -> Callable[[str], None]:
        column = self._mapping.column_of(field)

        def report(raw: str) -> None:
            issues.append(CellIssue(row=row_index, column=column if column is not None else -1, field=field, raw_value=raw))

        return report
