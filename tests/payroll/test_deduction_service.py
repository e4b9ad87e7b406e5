from __future__ import annotations

from datetime import date
from decimal import Decimal

from hr_attendance.biometric.model import AttendanceRecord, ParsedReport, ReportingPeriod
from hr_attendance.payroll.policy import DeductionPolicy
from hr_attendance.payroll.service import DeductionService


def _report(*records):
    return ParsedReport.build(period=ReportingPeriod(date(2024, 3, 1), date(2024, 3, 31)), records=records)


def _record(document_id, employee_id=None, **kwargs):
    return AttendanceRecord(
        employee_id=employee_id,
        employee_name=f"Emp {document_id}",
        document_id=document_id,
        department="",
        **kwargs,
    )


def test_three_employee_scenario():
    report = _report(
        _record("10000001", "1", tardy_count=1, tardy_minutes=15),
        _record("10000002", "2", absences=1),
        _record("10000003", "3", tardy_count=2, tardy_minutes=5),
    )
    policy = DeductionPolicy(tardy_minute_rate=Decimal("0.5"), tolerance_minutes=10, absence_day_rate=Decimal("100"))

    summary = DeductionService(policy).summarize(report)

    totals = {d.document_id: d.total_deduction for d in summary.deductions}
    assert totals == {"10000001": Decimal("2.50"), "10000002": Decimal("100.00"), "10000003": Decimal("0.00")}
    assert summary.grand_total_deduction == Decimal("102.50")
    assert summary.total_employees == 3
    assert summary.employees_with_deductions == 2
    assert [d.document_id for d in summary.with_deductions] == ["10000002", "10000001"]


def test_grand_total_equals_component_totals_and_sum_of_employees():
    report = _report(
        _record("10000001", tardy_count=1, tardy_minutes=33, early_leave_minutes=3),
        _record("10000002", absences=2, early_leave_minutes=11),
    )

    summary = DeductionService().summarize(report)

    assert summary.grand_total_deduction == (
        summary.total_tardy_deduction + summary.total_absence_deduction + summary.total_early_leave_deduction
    )
    assert summary.grand_total_deduction == sum((d.total_deduction for d in summary.deductions), Decimal("0"))
    assert summary.total_tardy_minutes == 23
    assert summary.total_absences == 2
    assert summary.total_early_leave_minutes == 14


def test_ordering_is_descending_and_stable_for_ties():
    report = _report(
        _record("10000001", absences=1),
        _record("10000002"),
        _record("10000003", absences=1),
        _record("10000004", absences=2),
    )

    summary = DeductionService().summarize(report)

    assert [d.document_id for d in summary.deductions] == ["10000004", "10000001", "10000003", "10000002"]
    assert [d.document_id for d in summary.per_record] == ["10000001", "10000002", "10000003", "10000004"]


def test_unmatched_records_are_deducted_too():
    summary = DeductionService().summarize(_report(_record("10000001", absences=1)))

    assert summary.deductions[0].employee_id is None
    assert summary.deductions[0].total_deduction == Decimal("100.00")


def test_same_input_same_output():
    report = _report(_record("10000001", tardy_count=1, tardy_minutes=40), _record("10000002", absences=1))
    svc = DeductionService()

    assert svc.summarize(report) == svc.summarize(report)


def test_empty_report():
    summary = DeductionService().summarize(_report())

    assert summary.total_employees == 0
    assert summary.grand_total_deduction == Decimal("0")
    assert summary.deductions == ()


def test_policy_override_per_call():
    report = _report(_record("10000001", absences=1))
    svc = DeductionService()

    summary = svc.summarize(report, policy=DeductionPolicy(absence_day_rate=Decimal("80")))

    assert summary.grand_total_deduction == Decimal("80.00")
    assert svc.policy.absence_day_rate == Decimal("100")
