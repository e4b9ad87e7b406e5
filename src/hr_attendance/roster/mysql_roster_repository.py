from __future__ import annotations

from typing import Sequence

import mysql.connector

from ..core.exceptions import RosterUnavailableError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import fetch_dicts, read_cursor
from .model import EmployeeRosterEntry
from .repository import RosterRepository


class MySQLRosterRepository(RosterRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_active(self) -> Sequence[EmployeeRosterEntry]:
        try:
            with read_cursor(self._conn_factory) as cur:
                cur.execute(
                    """
                    SELECT e.employee_id, e.full_name, e.document_id, d.dept_name
                    FROM employees e
                    LEFT JOIN departments d ON d.dept_id = e.dept_id
                    WHERE e.is_active = 1
                    ORDER BY e.employee_id
                    """
                )
                rows = fetch_dicts(cur)
        except mysql.connector.Error as exc:
            raise RosterUnavailableError("could not reach employee directory") from exc

        return [
            EmployeeRosterEntry(
                employee_id=str(row["employee_id"]),
                full_name=row["full_name"] or "",
                document_id=str(row["document_id"] or "").strip(),
                department=row.get("dept_name") or "",
            )
            for row in rows
        ]
