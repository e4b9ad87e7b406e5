from __future__ import annotations

import io
from datetime import date, datetime

import pdfplumber

from hr_attendance.biometric.model import AttendanceRecord, ParsedReport, ReportingPeriod
from hr_attendance.payroll.service import DeductionService
from hr_attendance.reports.pdf_report import ReportOptions, render_attendance_pdf

GENERATED = datetime(2024, 4, 1, 9, 30)


def _report(count: int, *, tardy: bool) -> ParsedReport:
    records = [
        AttendanceRecord(
            employee_id=str(i),
            employee_name=f"Maria{i:03d} Fernandez Gutierrez de la Cruz",
            document_id=f"{10000000 + i}",
            department="Operaciones Centrales",
            tardy_count=1 if tardy else 0,
            tardy_minutes=15 if tardy else 0,
        )
        for i in range(1, count + 1)
    ]
    return ParsedReport.build(period=ReportingPeriod(date(2024, 3, 1), date(2024, 3, 31)), records=records)


def _pages(pdf_bytes: bytes) -> list[str]:
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return [page.extract_text() or "" for page in pdf.pages]


def test_long_report_spans_pages_with_numbered_footer():
    report = _report(150, tardy=True)

    pages = _pages(render_attendance_pdf(report, DeductionService().summarize(report), generated_at=GENERATED))

    total = len(pages)
    assert total >= 4
    assert f"Página 1 de {total}" in pages[0]
    assert f"Página {total} de {total}" in pages[-1]
    assert all(f"Página {n} de {total}" in text for n, text in enumerate(pages, start=1))


def test_detail_columns_are_truncated():
    report = _report(3, tardy=True)

    text = "\n".join(_pages(render_attendance_pdf(report, DeductionService().summarize(report), generated_at=GENERATED)))

    # detail: name 20, department 10; deductions: name 25
    assert "Maria001 Fernandez G" in text
    assert "Maria001 Fernandez Gutier" in text
    assert "Gutierrez de la Cruz" not in text
    assert "Operacione" in text
    assert "Operaciones" not in text


def test_deductions_section_only_when_something_is_deducted():
    clean = _report(3, tardy=False)
    late = _report(3, tardy=True)

    clean_text = "\n".join(_pages(render_attendance_pdf(clean, DeductionService().summarize(clean), generated_at=GENERATED)))
    late_text = "\n".join(_pages(render_attendance_pdf(late, DeductionService().summarize(late), generated_at=GENERATED)))

    assert "Detalle de Descuentos" not in clean_text
    assert "Detalle de Descuentos" in late_text
    assert "TOTALES" in late_text


def test_hidden_deductions_drop_the_section_and_amounts():
    report = _report(3, tardy=True)

    text = "\n".join(
        _pages(
            render_attendance_pdf(
                report,
                DeductionService().summarize(report),
                ReportOptions(organization_name="ACME", show_deductions=False),
                generated_at=GENERATED,
            )
        )
    )

    assert "ACME" in text
    assert "Detalle de Descuentos" not in text
    assert "TOTAL DESCUENTOS" not in text
    assert "Min. Tard" in text


def test_currency_symbol_is_used_for_amounts():
    report = _report(1, tardy=True)

    text = "\n".join(
        _pages(
            render_attendance_pdf(
                report,
                DeductionService().summarize(report),
                ReportOptions(currency_symbol="USD"),
                generated_at=GENERATED,
            )
        )
    )

    assert "USD 2.50" in text
    assert "S/." not in text
