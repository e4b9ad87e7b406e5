from __future__ import annotations

from typing import Any, Optional, Sequence

from ...core.enums import Field
from ..model import SchemaMapping
from ..vocabulary import count_sub_tokens, find_header_row, looks_like_data_row, map_header_row, refine_with_sub_header
from .base import SchemaStrategy


class SubHeaderStrategy(SchemaStrategy):
    """Header + sub-header layout ("Tardanza" over "Cantidad | Minuto").

    Data starts one row later than in the single-row layout. A candidate row
    that reads like data (identifier, numbers, durations) is never a sub-header,
    whatever words its name or department cells contain.
    """

    name = "sub_header"

    def __init__(self, *, min_tokens: int = 2):
        self._min_tokens = int(min_tokens)

    def match(self, rows: Sequence[Sequence[Any]]) -> Optional[SchemaMapping]:
        header_row = find_header_row(rows)
        if header_row is None or header_row + 1 >= len(rows):
            return None

        columns, groups = map_header_row(rows[header_row])
        sub_row = rows[header_row + 1]
        if looks_like_data_row(sub_row, columns.get(Field.DOCUMENT_ID)):
            return None
        if count_sub_tokens(sub_row) < self._min_tokens:
            return None

        columns = refine_with_sub_header(columns, groups, sub_row)
        if Field.DOCUMENT_ID not in columns:
            return None
        return SchemaMapping(header_row=header_row + 1, columns=columns, strategy=self.name)
