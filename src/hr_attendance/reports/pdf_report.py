from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime
from functools import partial
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..biometric.model import ParsedReport
from ..common.datetime_utils import now_local
from ..core.constants import (
    DEDUCTION_NAME_WIDTH,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_ORGANIZATION_NAME,
    DEFAULT_REPORT_TITLE,
    DEPARTMENT_WIDTH,
    DETAIL_NAME_WIDTH,
)
from ..payroll.model import DeductionSummary
from .exports import record_totals
from .formatting import format_currency, format_minutes, truncate

HEADER_BLUE = colors.HexColor("#3B82F6")
HEADER_RED = colors.HexColor("#DC2626")
FOOTER_RED = colors.HexColor("#FEE2E2")
STRIPE = colors.HexColor("#F5F7FA")


@dataclass(frozen=True)
class ReportOptions:
    organization_name: str = DEFAULT_ORGANIZATION_NAME
    report_title: str = DEFAULT_REPORT_TITLE
    show_deductions: bool = True
    include_summary: bool = True
    include_details: bool = True
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL


class NumberedCanvas(canvas.Canvas):
    """Canvas that defers page output so each footer can say "Página X de Y"."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._saved_page_states: list[dict] = []

    def showPage(self):
        self._saved_page_states.append(dict(self.__dict__))
        self._startPage()

    def save(self):
        total = len(self._saved_page_states)
        for state in self._saved_page_states:
            self.__dict__.update(state)
            self._draw_footer(total)
            super().showPage()
        super().save()

    def _draw_footer(self, total: int) -> None:
        width, _ = self._pagesize
        self.setFont("Helvetica", 8)
        self.drawCentredString(width / 2, 10 * mm, f"Página {self._pageNumber} de {total}")


def _table_style(header_color, *, font_size: float = 8, right_from: Optional[int] = None) -> TableStyle:
    commands = [
        ("BACKGROUND", (0, 0), (-1, 0), header_color),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, STRIPE]),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]
    if right_from is not None:
        commands.append(("ALIGN", (right_from, 1), (-1, -1), "RIGHT"))
    return TableStyle(commands)


def _summary_table(report: ParsedReport, deductions: DeductionSummary, options: ReportOptions) -> Table:
    money = partial(format_currency, symbol=options.currency_symbol)
    rows = [
        ["Concepto", "Valor"],
        ["Total Empleados", str(report.total_employees)],
        ["Empleados con Coincidencia", str(report.matched_employees)],
        ["Empleados Sin Coincidencia", str(report.unmatched_employees)],
        ["Total Minutos de Tardanza", str(report.summary.total_tardy_minutes)],
        ["Total Faltas", str(report.summary.total_absences)],
        ["Total Minutos Salida Temprana", str(report.summary.total_early_leave_minutes)],
        ["Total Horas Extra", format_minutes(report.summary.total_overtime_minutes)],
    ]
    if options.show_deductions:
        rows += [
            ["Empleados con Descuentos", str(deductions.employees_with_deductions)],
            ["Total Descuento por Tardanzas", money(deductions.total_tardy_deduction)],
            ["Total Descuento por Faltas", money(deductions.total_absence_deduction)],
            ["Total Descuento por Salidas Tempranas", money(deductions.total_early_leave_deduction)],
            ["TOTAL DESCUENTOS", money(deductions.grand_total_deduction)],
        ]

    table = Table(rows, colWidths=[100 * mm, 60 * mm], hAlign="LEFT")
    style = _table_style(HEADER_BLUE, font_size=9, right_from=1)
    style.add("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold")
    table.setStyle(style)
    return table


def _detail_table(report: ParsedReport, deductions: DeductionSummary, options: ReportOptions) -> Table:
    if options.show_deductions:
        head = ["DNI", "Nombre", "Área", "H. Prog", "H. Real", "Tardanzas", "Faltas", "Descuento"]
    else:
        head = ["DNI", "Nombre", "Área", "H. Prog", "H. Real", "Tardanzas", "Min. Tard", "Faltas"]

    rows = [head]
    for record, total in zip(report.records, record_totals(report, deductions)):
        row = [
            record.document_id,
            truncate(record.employee_name, DETAIL_NAME_WIDTH),
            truncate(record.department, DEPARTMENT_WIDTH),
            format_minutes(record.scheduled_minutes),
            format_minutes(record.actual_minutes),
            str(record.tardy_count),
        ]
        if options.show_deductions:
            row += [str(record.absences), format_currency(total, options.currency_symbol)]
        else:
            row += [str(record.tardy_minutes), str(record.absences)]
        rows.append(row)

    widths = [22 * mm, 35 * mm, 20 * mm, 18 * mm, 18 * mm, 18 * mm, 18 * mm, 22 * mm]
    table = Table(rows, colWidths=widths, repeatRows=1, hAlign="LEFT")
    style = _table_style(HEADER_BLUE, font_size=7)
    style.add("ALIGN", (3, 1), (6, -1), "CENTER")
    style.add("ALIGN", (7, 1), (7, -1), "RIGHT")
    table.setStyle(style)
    return table


def _deductions_table(deductions: DeductionSummary, options: ReportOptions) -> Table:
    money = partial(format_currency, symbol=options.currency_symbol)
    rows = [["DNI", "Nombre", "Min. Tard", "Desc. Tard", "Faltas", "Desc. Falta", "Min. Sal.", "Desc. Sal.", "Total"]]
    for d in deductions.with_deductions:
        rows.append(
            [
                d.document_id,
                truncate(d.employee_name, DEDUCTION_NAME_WIDTH),
                str(d.tardy_minutes),
                money(d.tardy_deduction),
                str(d.absences),
                money(d.absence_deduction),
                str(d.early_leave_minutes),
                money(d.early_leave_deduction),
                money(d.total_deduction),
            ]
        )
    rows.append(
        [
            "",
            "TOTALES",
            str(deductions.total_tardy_minutes),
            money(deductions.total_tardy_deduction),
            str(deductions.total_absences),
            money(deductions.total_absence_deduction),
            str(deductions.total_early_leave_minutes),
            money(deductions.total_early_leave_deduction),
            money(deductions.grand_total_deduction),
        ]
    )

    widths = [20 * mm, 36 * mm, 15 * mm, 19 * mm, 13 * mm, 19 * mm, 15 * mm, 19 * mm, 22 * mm]
    table = Table(rows, colWidths=widths, repeatRows=1, hAlign="LEFT")
    style = _table_style(HEADER_RED, font_size=7)
    style.add("ALIGN", (2, 1), (-1, -1), "RIGHT")
    style.add("FONTNAME", (-1, 1), (-1, -1), "Helvetica-Bold")
    style.add("BACKGROUND", (0, -1), (-1, -1), FOOTER_RED)
    style.add("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold")
    table.setStyle(style)
    return table


def render_attendance_pdf(
    report: ParsedReport,
    deductions: DeductionSummary,
    options: Optional[ReportOptions] = None,
    *,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render the import as a printable A4 document and return the PDF bytes."""

    options = options or ReportOptions()
    generated_at = generated_at or now_local()

    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=16 * mm,
        bottomMargin=18 * mm,
        title=options.report_title,
        author=options.organization_name,
    )

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="OrgTitle", parent=styles["Title"], fontSize=18, leading=22, spaceAfter=4))
    styles.add(ParagraphStyle(name="ReportTitle", parent=styles["Title"], fontSize=14, leading=18, spaceAfter=4))
    styles.add(ParagraphStyle(name="Meta", parent=styles["Normal"], fontSize=10, leading=13, alignment=1))
    styles.add(ParagraphStyle(name="Section", parent=styles["Heading2"], fontSize=12, leading=15, spaceBefore=6))

    story = [
        Paragraph(escape(options.organization_name), styles["OrgTitle"]),
        Paragraph(escape(options.report_title), styles["ReportTitle"]),
        Paragraph(f"Período: {report.period.label()}", styles["Meta"]),
        Paragraph(f"Generado: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}", styles["Meta"]),
        Spacer(1, 10 * mm),
    ]

    if options.include_summary:
        story += [Paragraph("Resumen General", styles["Section"]), _summary_table(report, deductions, options)]
        story.append(Spacer(1, 8 * mm))

    if options.include_details:
        story.append(Paragraph("Detalle por Empleado", styles["Section"]))
        if report.records:
            story.append(_detail_table(report, deductions, options))
        else:
            story.append(Paragraph("Sin registros en el archivo.", styles["Normal"]))

    if options.show_deductions and deductions.employees_with_deductions > 0:
        story += [
            PageBreak(),
            Paragraph("Detalle de Descuentos", styles["Section"]),
            _deductions_table(deductions, options),
        ]

    doc.build(story, canvasmaker=NumberedCanvas)
    return buf.getvalue()
