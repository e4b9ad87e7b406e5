from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..common.chain import first_success
from ..core.constants import STATISTICS_SHEET_TOKENS
from ..core.exceptions import ParseError
from .model import Sheet


class SheetStrategy(ABC):
    """Strategy Pattern: one heuristic for finding the per-employee statistics sheet."""

    @abstractmethod
    def match(self, sheets: Sequence[Sheet]) -> Optional[Sheet]:
        raise NotImplementedError


class NamedSheetStrategy(SheetStrategy):
    """Pick the first sheet whose name mentions statistics ("Estadísticas", "Page 2")."""

    def __init__(self, tokens: Sequence[str] = STATISTICS_SHEET_TOKENS):
        self._tokens = tuple(t.lower() for t in tokens)

    def match(self, sheets: Sequence[Sheet]) -> Optional[Sheet]:
        for sheet in sheets:
            name = sheet.name.lower()
            if any(token in name for token in self._tokens):
                return sheet
        return None


class PositionalSheetStrategy(SheetStrategy):
    """Terminal exports put statistics on the second sheet; single-sheet files use the first."""

    def match(self, sheets: Sequence[Sheet]) -> Optional[Sheet]:
        if not sheets:
            return None
        return sheets[1] if len(sheets) > 1 else sheets[0]


DEFAULT_SHEET_STRATEGIES: tuple[SheetStrategy, ...] = (NamedSheetStrategy(), PositionalSheetStrategy())


def select_data_sheet(sheets: Sequence[Sheet], strategies: Sequence[SheetStrategy] = DEFAULT_SHEET_STRATEGIES) -> Sheet:
    sheet = first_success(strategies, sheets)
    if sheet is None or sheet.is_empty:
        raise ParseError("no data sheet found")
    return sheet
