from __future__ import annotations

import io
import logging

import numpy as np
import pandas as pd

from ..core.exceptions import ParseError
from .model import CellValue, Sheet

logger = logging.getLogger(__name__)


def read_workbook(payload: bytes) -> list[Sheet]:
    """Open an XLS/XLSX payload and return every sheet as a raw grid.

    pandas sniffs the container format, so legacy ``.xls`` goes through xlrd and
    ``.xlsx`` through openpyxl. Headers are not interpreted here.
    """

    if not payload:
        raise ParseError("could not read file")

    try:
        frames = pd.read_excel(io.BytesIO(payload), sheet_name=None, header=None, dtype=object)
    except Exception as exc:
        logger.warning("Workbook could not be opened: %s", exc)
        raise ParseError("could not read file") from exc

    sheets = [Sheet(name=str(name), rows=_frame_to_rows(frame)) for name, frame in frames.items()]
    logger.debug("Workbook opened with sheets=%s", [s.name for s in sheets])
    return sheets


def _frame_to_rows(frame: pd.DataFrame) -> list[list[CellValue]]:
    return [[_clean_cell(value) for value in row] for row in frame.itertuples(index=False, name=None)]


def _clean_cell(value) -> CellValue:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, str):
        return value if value.strip() else None
    return value
