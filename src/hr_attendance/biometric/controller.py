from __future__ import annotations

import logging

from flask import Flask, current_app, jsonify, request

from ..core.constants import ALLOWED_UPLOAD_EXTENSIONS, DEFAULT_MAX_UPLOAD_BYTES
from ..core.enums import ExportFormat
from ..core.exceptions import ParseError, RosterUnavailableError, ValidationError
from ..container import Container
from ..payroll.policy import DeductionPolicy
from ..payroll.service import DeductionService
from ..reports.exports import export_records_csv, export_records_xlsx
from ..reports.pdf_report import ReportOptions, render_attendance_pdf
from ..reports.serializers import report_to_dict, summary_to_dict

logger = logging.getLogger(__name__)

_POLICY_FIELDS = (
    "tardy_minute_rate",
    "absence_day_rate",
    "early_leave_minute_rate",
    "tolerance_minutes",
    "max_deduction_percent",
)

_MIMETYPES = {
    ExportFormat.PDF: "application/pdf",
    ExportFormat.CSV: "text/csv",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _read_upload() -> bytes:
        upload = request.files.get("file")
        if upload is None or not upload.filename:
            raise ValidationError("Adjunte el archivo del biométrico (campo 'file')")
        if not upload.filename.lower().endswith(ALLOWED_UPLOAD_EXTENSIONS):
            raise ValidationError("Solo se permiten archivos Excel (.xls, .xlsx)")

        payload = upload.read()
        limit = int(current_app.config.get("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))
        if not payload:
            raise ValidationError("El archivo está vacío")
        if len(payload) > limit:
            raise ValidationError(f"El archivo supera el tamaño máximo ({limit // 1024} KB)")
        return payload

    def _policy() -> DeductionPolicy:
        overrides = {name: request.form.get(name) for name in _POLICY_FIELDS}
        return container.deduction_service.policy.with_overrides(overrides)

    def _run_import():
        payload = _read_upload()
        policy = _policy()
        report = container.import_service.import_workbook(payload)
        deductions = DeductionService(policy).summarize(report)
        return report, deductions, policy

    def _report_options() -> ReportOptions:
        show = request.form.get("show_deductions", "1") not in {"0", "false", "no"}
        return ReportOptions(
            organization_name=current_app.config.get("ORGANIZATION_NAME") or ReportOptions.organization_name,
            currency_symbol=current_app.config.get("CURRENCY_SYMBOL") or ReportOptions.currency_symbol,
            show_deductions=show,
        )

    def _handle(view):
        try:
            return view()
        except ValidationError as e:
            return _error(str(e), 400)
        except ParseError as e:
            return _error(str(e), 400)
        except RosterUnavailableError as e:
            return _error(str(e), 503)

    @app.route("/api/attendance/biometric/import", methods=["POST"], endpoint="biometric_import")
    def biometric_import():
        def view():
            report, deductions, policy = _run_import()
            return jsonify(
                {
                    "success": True,
                    "report": report_to_dict(report),
                    "deductions": summary_to_dict(deductions),
                    "policy": {name: str(getattr(policy, name)) for name in _POLICY_FIELDS},
                }
            )

        return _handle(view)

    @app.route("/api/attendance/biometric/report.<fmt>", methods=["POST"], endpoint="biometric_report")
    def biometric_report(fmt: str):
        try:
            export_format = ExportFormat(fmt.lower())
        except ValueError:
            return _error(f"Formato no soportado: {fmt}", 404)

        def view():
            report, deductions, _ = _run_import()
            if export_format is ExportFormat.PDF:
                body = render_attendance_pdf(report, deductions, _report_options())
            elif export_format is ExportFormat.CSV:
                body = export_records_csv(report, deductions).encode("utf-8-sig")
            else:
                body = export_records_xlsx(report, deductions)

            filename = f"reporte_asistencia_{report.period.start.isoformat()}_{report.period.end.isoformat()}.{export_format.value}"
            logger.info("Rendered %s report %s (%s bytes)", export_format.value, filename, len(body))
            return app.response_class(
                body,
                mimetype=_MIMETYPES[export_format],
                headers={"Content-Disposition": f"attachment; filename={filename}"},
            )

        return _handle(view)
