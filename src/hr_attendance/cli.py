"""Offline import: run a time-clock export through the pipeline from the shell.

Usage:
    hr-attendance-import export.xls --roster-csv empleados.csv --out-dir reportes/
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module

from .container import build_container, build_service_container
from .core.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_ORGANIZATION_NAME
from .core.exceptions import DomainError
from .reports.exports import export_records_csv, export_records_xlsx
from .reports.pdf_report import ReportOptions, render_attendance_pdf
from .roster.csv_roster_repository import CsvRosterRepository


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import a biometric statistics export and render its reports.")
    parser.add_argument("workbook", help="Path to the .xls/.xlsx file exported by the time clock.")
    parser.add_argument(
        "--roster-csv",
        default=None,
        help="Roster CSV (employee_id, full_name, document_id, department). Defaults to the configured database.",
    )
    parser.add_argument("--out-dir", default=".", help="Folder where the PDF/CSV/XLSX files are written.")
    parser.add_argument("--organization", default=None, help="Organization name printed on the PDF.")
    parser.add_argument("--no-deductions", action="store_true", help="Leave deduction columns out of the PDF.")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s [%(name)s] %(message)s")

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    deduction_policy = getattr(settings, "DEDUCTION_POLICY", None)
    if args.roster_csv:
        container = build_service_container(CsvRosterRepository(args.roster_csv), deduction_policy=deduction_policy)
    else:
        container = build_container(db_config=settings.DB_CONFIG, deduction_policy=deduction_policy)

    try:
        payload = Path(args.workbook).read_bytes()
    except OSError as exc:
        print(f"could not read file: {exc}", file=sys.stderr)
        return 2

    try:
        report = container.import_service.import_workbook(payload)
    except DomainError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    deductions = container.deduction_service.summarize(report)

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    stem = f"reporte_asistencia_{report.period.start.isoformat()}_{report.period.end.isoformat()}"

    options = ReportOptions(
        organization_name=args.organization or getattr(settings, "ORGANIZATION_NAME", DEFAULT_ORGANIZATION_NAME),
        currency_symbol=getattr(settings, "CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
        show_deductions=not args.no_deductions,
    )

    (out_dir / f"{stem}.pdf").write_bytes(render_attendance_pdf(report, deductions, options))
    (out_dir / f"{stem}.csv").write_text(export_records_csv(report, deductions), encoding="utf-8-sig")
    (out_dir / f"{stem}.xlsx").write_bytes(export_records_xlsx(report, deductions))

    print(
        f"OK: {report.total_employees} empleados ({report.matched_employees} con coincidencia, "
        f"{report.unmatched_employees} sin coincidencia), descuentos {deductions.grand_total_deduction} "
        f"-> {out_dir}/{stem}.*"
    )
    if report.cell_issues:
        print(f"Aviso: {len(report.cell_issues)} celdas no se pudieron leer y se tomaron como 0", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
