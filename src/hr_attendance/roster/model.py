from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class EmployeeRosterEntry:
    """Read-model of an active employee as seen by the attendance import."""

    employee_id: str
    full_name: str
    document_id: str
    department: str = ""


def index_roster(entries: Iterable[EmployeeRosterEntry]) -> dict[str, EmployeeRosterEntry]:
    """Key the roster by document id (first entry wins on duplicates)."""

    index: dict[str, EmployeeRosterEntry] = {}
    for entry in entries:
        key = entry.document_id.strip()
        if key and key not in index:
            index[key] = entry
    return index
