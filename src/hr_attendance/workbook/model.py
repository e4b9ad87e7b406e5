from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from typing import Union

CellValue = Union[str, int, float, datetime, time, timedelta, None]


@dataclass(frozen=True)
class Sheet:
    """One worksheet as a raw grid of cell values (no business meaning)."""

    name: str
    rows: list[list[CellValue]] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not any(cell not in (None, "") for row in self.rows for cell in row)
