"""JSON-friendly views of import results (money as strings, dates as ISO)."""

from __future__ import annotations

from typing import Any

from ..biometric.model import CellIssue, ParsedReport
from ..payroll.model import DeductionSummary, EmployeeDeduction
from .exports import record_row


def report_to_dict(report: ParsedReport) -> dict[str, Any]:
    records = []
    for record in report.records:
        row = record_row(record)
        row["employee_id"] = record.employee_id
        row["matched"] = record.matched
        records.append(row)

    return {
        "period": {"start": report.period.start.isoformat(), "end": report.period.end.isoformat()},
        "sheet_name": report.sheet_name,
        "schema_strategy": report.schema_strategy,
        "total_employees": report.total_employees,
        "matched_employees": report.matched_employees,
        "unmatched_employees": report.unmatched_employees,
        "summary": {
            "total_tardy_minutes": report.summary.total_tardy_minutes,
            "total_absences": report.summary.total_absences,
            "total_early_leave_minutes": report.summary.total_early_leave_minutes,
            "total_overtime_minutes": report.summary.total_overtime_minutes,
        },
        "records": records,
        "cell_issues": [issue_to_dict(i) for i in report.cell_issues],
    }


def issue_to_dict(issue: CellIssue) -> dict[str, Any]:
    return {"row": issue.row, "column": issue.column, "field": issue.field.value, "raw_value": issue.raw_value}


def deduction_to_dict(deduction: EmployeeDeduction) -> dict[str, Any]:
    return {
        "employee_id": deduction.employee_id,
        "employee_name": deduction.employee_name,
        "document_id": deduction.document_id,
        "tardy_minutes": deduction.tardy_minutes,
        "tardy_deduction": str(deduction.tardy_deduction),
        "absences": deduction.absences,
        "absence_deduction": str(deduction.absence_deduction),
        "early_leave_minutes": deduction.early_leave_minutes,
        "early_leave_deduction": str(deduction.early_leave_deduction),
        "total_deduction": str(deduction.total_deduction),
    }


def summary_to_dict(summary: DeductionSummary) -> dict[str, Any]:
    return {
        "total_employees": summary.total_employees,
        "employees_with_deductions": summary.employees_with_deductions,
        "total_tardy_minutes": summary.total_tardy_minutes,
        "total_tardy_deduction": str(summary.total_tardy_deduction),
        "total_absences": summary.total_absences,
        "total_absence_deduction": str(summary.total_absence_deduction),
        "total_early_leave_minutes": summary.total_early_leave_minutes,
        "total_early_leave_deduction": str(summary.total_early_leave_deduction),
        "grand_total_deduction": str(summary.grand_total_deduction),
        "deductions": [deduction_to_dict(d) for d in summary.deductions],
    }
