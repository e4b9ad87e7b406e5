from __future__ import annotations

from typing import Any, Optional, Sequence

from ...core.enums import Field
from ..model import SchemaMapping
from ..vocabulary import find_header_row, map_header_row
from .base import SchemaStrategy


class HeaderTokenStrategy(SchemaStrategy):
    """Single header row: every column is named in one row."""

    name = "header_token"

    def match(self, rows: Sequence[Sequence[Any]]) -> Optional[SchemaMapping]:
        header_row = find_header_row(rows)
        if header_row is None:
            return None

        columns, _ = map_header_row(rows[header_row])
        if Field.DOCUMENT_ID not in columns:
            return None
        return SchemaMapping(header_row=header_row, columns=columns, strategy=self.name)
