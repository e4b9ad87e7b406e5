from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from ..model import SchemaMapping


class SchemaStrategy(ABC):
    """Strategy Pattern: one way of locating the header and its columns.

    ``match`` returns None when the heuristic does not apply, so strategies can
    be chained and the first one that recognises the layout wins.
    """

    name: str = ""

    @abstractmethod
    def match(self, rows: Sequence[Sequence[Any]]) -> Optional[SchemaMapping]:
        raise NotImplementedError
