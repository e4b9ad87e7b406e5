from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ...core.enums import Field
from ..model import SchemaMapping
from .base import SchemaStrategy

# Column order of the terminal's standard statistics export.
DEFAULT_COLUMNS: Mapping[Field, int] = {
    Field.DOCUMENT_ID: 0,
    Field.NAME: 1,
    Field.DEPARTMENT: 2,
    Field.SCHEDULED_HOURS: 3,
    Field.ACTUAL_HOURS: 4,
    Field.TARDY_COUNT: 5,
    Field.TARDY_MINUTES: 6,
    Field.EARLY_LEAVE_COUNT: 7,
    Field.EARLY_LEAVE_MINUTES: 8,
    Field.OVERTIME_WEEKDAY: 9,
    Field.OVERTIME_HOLIDAY: 10,
    Field.DAYS_ATTENDED: 11,
    Field.EARLY_LEAVE_DAYS: 12,
    Field.ABSENCES: 13,
    Field.PERMISSIONS: 14,
}


class PositionalStrategy(SchemaStrategy):
    """Last resort for exports without recognisable headers.

    Best effort only: every row is read with the default column order, and rows
    whose first cell is not an identifier are dropped by the row parser.
    """

    name = "positional"

    def __init__(self, columns: Mapping[Field, int] = DEFAULT_COLUMNS):
        self._columns = dict(columns)

    def match(self, rows: Sequence[Sequence[Any]]) -> Optional[SchemaMapping]:
        return SchemaMapping(header_row=-1, columns=dict(self._columns), strategy=self.name)
