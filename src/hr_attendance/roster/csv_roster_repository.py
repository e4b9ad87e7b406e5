from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd

from ..core.exceptions import RosterUnavailableError
from .model import EmployeeRosterEntry
from .repository import RosterRepository

REQUIRED_COLUMNS = ("employee_id", "full_name", "document_id")


class CsvRosterRepository(RosterRepository):
    """Roster read from a CSV export of the employee directory (offline imports).

    Columns: employee_id, full_name, document_id, optional department and is_active.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def list_active(self) -> Sequence[EmployeeRosterEntry]:
        try:
            df = pd.read_csv(self._path, dtype=str, keep_default_na=False)
        except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
            raise RosterUnavailableError("could not reach employee directory") from exc

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise RosterUnavailableError(f"roster file is missing columns: {', '.join(missing)}")

        if "is_active" in df.columns:
            df = df[df["is_active"].str.strip().str.lower().isin({"1", "true", "si", "sí", "yes", ""})]

        return [
            EmployeeRosterEntry(
                employee_id=row["employee_id"].strip(),
                full_name=row["full_name"].strip(),
                document_id=row["document_id"].strip(),
                department=str(row.get("department", "")).strip(),
            )
            for row in df.to_dict(orient="records")
        ]
