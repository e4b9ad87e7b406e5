from __future__ import annotations

import logging
import re
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_bounds, now_local, parse_iso_date
from ..core.constants import PERIOD_SCAN_ROWS
from .model import ReportingPeriod

logger = logging.getLogger(__name__)

_RANGE_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*[~\-]\s*(\d{4}-\d{2}-\d{2})")


def find_period(rows: Sequence[Sequence[Any]], *, scan_rows: int = PERIOD_SCAN_ROWS) -> Optional[ReportingPeriod]:
    """First ``YYYY-MM-DD ~ YYYY-MM-DD`` (or ``-``) range in the top rows, if any."""

    for row in rows[:scan_rows]:
        for cell in row:
            if not isinstance(cell, str):
                continue
            for first, second in _RANGE_RE.findall(cell):
                try:
                    start, end = parse_iso_date(first), parse_iso_date(second)
                except ValueError:
                    continue
                return ReportingPeriod(start=min(start, end), end=max(start, end))
    return None


def extract_period(rows: Sequence[Sequence[Any]], *, today: Optional[date] = None) -> ReportingPeriod:
    """Reporting period of the export; the current month when the file does not say."""

    period = find_period(rows)
    if period is not None:
        return period

    start, end = month_bounds(today or now_local().date())
    logger.info("No period found in export header; using %s..%s", start, end)
    return ReportingPeriod(start=start, end=end)
