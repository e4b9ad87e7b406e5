from __future__ import annotations

from dataclasses import replace
from typing import Mapping, Sequence

from ..biometric.model import AttendanceRecord
from .model import EmployeeRosterEntry


def reconcile(records: Sequence[AttendanceRecord], roster: Mapping[str, EmployeeRosterEntry]) -> list[AttendanceRecord]:
    """Attach roster identity to each record by document id.

    Matched rows take the roster's canonical name and department; unmatched rows
    keep what the file said so someone can fix the roster afterwards.
    """

    out: list[AttendanceRecord] = []
    for record in records:
        entry = roster.get(record.document_id.strip())
        if entry is None:
            out.append(replace(record, employee_id=None))
            continue
        out.append(
            replace(
                record,
                employee_id=entry.employee_id,
                employee_name=entry.full_name,
                department=entry.department,
            )
        )
    return out
