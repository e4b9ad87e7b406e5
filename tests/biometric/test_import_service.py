from __future__ import annotations

from datetime import date

import pytest

from hr_attendance.biometric.service import BiometricImportService
from hr_attendance.core.exceptions import ParseError, RosterUnavailableError
from hr_attendance.roster.model import EmployeeRosterEntry

HEADER = ["ID", "Nombre", "Departamento", "Normal", "Real", "Cantidad", "Minuto", "Asistidos", "Falta"]


class InMemoryRoster:
    def __init__(self, entries):
        self._entries = list(entries)
        self.calls = 0

    def list_active(self):
        self.calls += 1
        return list(self._entries)


class BrokenRoster:
    def list_active(self):
        raise ConnectionError("directory down")


def _statistics_workbook(xlsx_bytes) -> bytes:
    return xlsx_bytes(
        {
            "Registros": [["raw punches"]],
            "Estadísticas": [
                ["Reporte estadístico"],
                ["2024-03-01 ~ 2024-03-31"],
                HEADER,
                ["12345678", "JUAN~PEREZ", "Ventas", "160:00", "150:30", 1, 15, "20/19", 1],
                ["99999999", "NUEVO~EMPLEADO", "Almacen", "160:00", "160:00", 0, 0, "20/20", 0],
            ],
        }
    )


def test_import_reconciles_against_roster(xlsx_bytes):
    roster = InMemoryRoster(
        [EmployeeRosterEntry(employee_id="E-1", full_name="Juan Pérez Ríos", document_id="12345678", department="Comercial")]
    )
    svc = BiometricImportService(roster)

    report = svc.import_workbook(_statistics_workbook(xlsx_bytes))

    assert report.sheet_name == "Estadísticas"
    assert report.schema_strategy == "header_token"
    assert (report.period.start, report.period.end) == (date(2024, 3, 1), date(2024, 3, 31))
    assert report.total_employees == 2
    assert report.matched_employees == 1
    assert report.unmatched_employees == 1

    matched, unmatched = report.records
    assert matched.employee_id == "E-1"
    assert matched.employee_name == "Juan Pérez Ríos"
    assert matched.department == "Comercial"
    assert matched.actual_minutes == 9030

    assert unmatched.employee_id is None
    assert unmatched.employee_name == "NUEVO EMPLEADO"
    assert unmatched.department == "Almacen"
    assert report.unmatched_records == [unmatched]

    assert report.summary.total_tardy_minutes == 15
    assert report.summary.total_absences == 1
    assert roster.calls == 1


def test_import_without_period_uses_current_month(xlsx_bytes):
    payload = xlsx_bytes({"Sheet1": [HEADER, ["12345678", "ANA", "Ops", "8:00", "8:00", 0, 0, "1/1", 0]]})

    report = BiometricImportService(InMemoryRoster([])).import_workbook(payload, today=date(2024, 2, 10))

    assert (report.period.start, report.period.end) == (date(2024, 2, 1), date(2024, 2, 29))
    assert report.matched_employees == 0


def test_roster_failure_aborts_the_import(xlsx_bytes):
    svc = BiometricImportService(BrokenRoster())

    with pytest.raises(RosterUnavailableError):
        svc.import_workbook(_statistics_workbook(xlsx_bytes))


def test_unreadable_payload_is_a_parse_error():
    svc = BiometricImportService(InMemoryRoster([]))

    with pytest.raises(ParseError, match="could not read file"):
        svc.import_workbook(b"this is not a spreadsheet")


def test_empty_data_sheet_is_a_parse_error(xlsx_bytes):
    svc = BiometricImportService(InMemoryRoster([]))
    payload = xlsx_bytes({"Registros": [["x"]], "Estadísticas": []})

    with pytest.raises(ParseError, match="no data sheet found"):
        svc.import_workbook(payload)


def test_first_employee_named_like_a_sub_header_is_kept(xlsx_bytes):
    payload = xlsx_bytes(
        {
            "Estadísticas": [
                HEADER,
                ["12345678", "JOSE~REALPE", "Proyectos Especiales", "160:00", "160:00", 0, 0, "20/20", 0],
                ["87654321", "ANA~TORRES", "Ventas", "160:00", "150:00", 1, 15, "20/19", 1],
            ]
        }
    )

    report = BiometricImportService(InMemoryRoster([])).import_workbook(payload, today=date(2024, 3, 5))

    assert report.schema_strategy == "header_token"
    assert report.total_employees == 2
    assert [r.department for r in report.records] == ["Proyectos Especiales", "Ventas"]
    assert report.cell_issues == ()
