from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Sequence

from ..common.chain import first_success
from .model import SchemaMapping
from .strategies.base import SchemaStrategy
from .strategies.header_token_strategy import HeaderTokenStrategy
from .strategies.positional_strategy import PositionalStrategy
from .strategies.sub_header_strategy import SubHeaderStrategy

logger = logging.getLogger(__name__)


def default_schema_strategies() -> list[SchemaStrategy]:
    # Two-row layout first: its header row also satisfies the single-row check.
    return [SubHeaderStrategy(), HeaderTokenStrategy(), PositionalStrategy()]


@dataclass
class SchemaDetector:
    """Chain of responsibility over schema strategies (first success wins)."""

    strategies: list[SchemaStrategy] = field(default_factory=default_schema_strategies)

    def detect(self, rows: Sequence[Sequence[Any]]) -> SchemaMapping:
        mapping = first_success(self.strategies, rows)
        if mapping is None:
            mapping = PositionalStrategy().match(rows)

        if mapping.strategy == PositionalStrategy.name:
            logger.warning("No header row found in the first rows; falling back to default column layout")
        else:
            logger.info(
                "Header detected at row %s via %s (%s columns)",
                mapping.header_row,
                mapping.strategy,
                len(mapping.columns),
            )
        return mapping
