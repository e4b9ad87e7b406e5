"""Tabular exports of an import (CSV for re-import elsewhere, XLSX for people)."""

from __future__ import annotations

import csv
import io
from decimal import Decimal
from typing import Any, Optional

import pandas as pd
from openpyxl.utils import get_column_letter

from ..biometric.model import AttendanceRecord, ParsedReport
from ..payroll.model import DeductionSummary, EmployeeDeduction

RECORD_COLUMNS = [
    "document_id",
    "employee_id",
    "employee_name",
    "department",
    "matched",
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
]

DEDUCTION_COLUMNS = [
    "document_id",
    "employee_id",
    "employee_name",
    "tardy_minutes",
    "tardy_deduction",
    "absences",
    "absence_deduction",
    "early_leave_minutes",
    "early_leave_deduction",
    "total_deduction",
]


def record_row(record: AttendanceRecord) -> dict[str, Any]:
    row: dict[str, Any] = {name: getattr(record, name) for name in RECORD_COLUMNS if name != "matched"}
    row["employee_id"] = record.employee_id or ""
    row["matched"] = "SI" if record.matched else "NO"
    return row


def deduction_row(deduction: EmployeeDeduction) -> dict[str, Any]:
    row: dict[str, Any] = {name: getattr(deduction, name) for name in DEDUCTION_COLUMNS}
    row["employee_id"] = deduction.employee_id or ""
    return row


def record_totals(report: ParsedReport, deductions: Optional[DeductionSummary]) -> list[Decimal]:
    """Total deduction of each record, aligned with ``report.records`` by position."""

    per_record = deductions.per_record if deductions is not None else ()
    return [
        per_record[index].total_deduction if index < len(per_record) else Decimal("0")
        for index in range(len(report.records))
    ]


def export_records_csv(report: ParsedReport, deductions: Optional[DeductionSummary] = None) -> str:
    """Header row + one row per record, in file order.

    Text fields are always quoted, numbers never are, so names with commas or
    leading zeros in document ids survive a spreadsheet round trip.
    """

    columns = RECORD_COLUMNS + (["total_deduction"] if deductions is not None else [])
    totals = record_totals(report, deductions)

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=columns, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    writer.writeheader()
    for record, total in zip(report.records, totals):
        row = record_row(record)
        if deductions is not None:
            row["total_deduction"] = total
        writer.writerow(row)
    return out.getvalue()


def export_records_xlsx(report: ParsedReport, deductions: Optional[DeductionSummary] = None) -> bytes:
    """Workbook with an "Asistencia" sheet and, when given, a "Descuentos" sheet."""

    frames = {"Asistencia": pd.DataFrame([record_row(r) for r in report.records], columns=RECORD_COLUMNS)}
    if deductions is not None:
        frames["Descuentos"] = pd.DataFrame(
            [deduction_row(d) for d in deductions.deductions],
            columns=DEDUCTION_COLUMNS,
        )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        for sheet_name, frame in frames.items():
            frame.to_excel(writer, sheet_name=sheet_name, index=False)
            _autosize(writer.sheets[sheet_name], frame)
    return out.getvalue()


def _autosize(worksheet, frame: pd.DataFrame) -> None:
    for index, column in enumerate(frame.columns, start=1):
        values = [str(v) for v in frame[column].tolist()]
        width = max([len(str(column))] + [len(v) for v in values]) + 2
        worksheet.column_dimensions[get_column_letter(index)].width = width
