"""Header vocabulary of time-clock statistics exports.

Exports label columns in Spanish or English and often split a header over two
rows: a merged group label ("Tardanza") above sub-columns ("Cantidad",
"Minuto"). Group labels stay in effect to the right until another label
appears, which is how merged cells come out of the reader (label in the first
column, blanks after it).
"""

from __future__ import annotations

import re
from datetime import date, time, timedelta
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.constants import HEADER_SCAN_ROWS, MIN_IDENTIFIER_LENGTH
from ..core.enums import ColumnGroup, Field
from .decoders import cell_text

_ID_RE = re.compile(r"\bid\b")
_WORD_RE = re.compile(r"[a-záéíóúñü]+")
_DATA_VALUE_RE = re.compile(r"^(\d+(:\d{2}){1,2}|\d+\s*/\s*\d+)$")

# Checked in order; first hit wins.
_DIRECT_LABELS: tuple[tuple[tuple[str, ...], Field], ...] = (
    (("dias salida", "días salida", "early leave days", "early days"), Field.EARLY_LEAVE_DAYS),
    (("asistid", "asistencia", "attend"), Field.DAYS_ATTENDED),
    (("falta", "ausencia", "absen"), Field.ABSENCES),
    (("permiso", "permission", "licencia"), Field.PERMISSIONS),
    (("departamento", "department", "depto", "área", "area"), Field.DEPARTMENT),
    (("nombre", "name"), Field.NAME),
    (("dni", "documento", "identific", "código", "codigo"), Field.DOCUMENT_ID),
)

_GROUP_LABELS: tuple[tuple[tuple[str, ...], ColumnGroup], ...] = (
    (("horas de trabajo", "horario", "jornada", "work hours", "working hours"), ColumnGroup.WORK_HOURS),
    (("tardanza", "retardo", "late"), ColumnGroup.TARDY),
    (("salida temprana", "salida anticipada", "early"), ColumnGroup.EARLY_LEAVE),
    (("extra", "overtime"), ColumnGroup.OVERTIME),
)

# word prefix -> canonical sub-header token
_SUB_TOKENS: tuple[tuple[str, str], ...] = (
    ("normal", "normal"),
    ("programad", "normal"),
    ("real", "real"),
    ("cantidad", "cantidad"),
    ("veces", "cantidad"),
    ("count", "cantidad"),
    ("times", "cantidad"),
    ("minuto", "minuto"),
    ("minute", "minuto"),
    ("especial", "especial"),
    ("feriado", "especial"),
    ("holiday", "especial"),
)
_EXACT_SUB_TOKENS = {"min": "minuto"}

_GROUP_FIELDS: Mapping[ColumnGroup, Mapping[str, Field]] = {
    ColumnGroup.WORK_HOURS: {"normal": Field.SCHEDULED_HOURS, "real": Field.ACTUAL_HOURS},
    ColumnGroup.TARDY: {"cantidad": Field.TARDY_COUNT, "minuto": Field.TARDY_MINUTES},
    ColumnGroup.EARLY_LEAVE: {"cantidad": Field.EARLY_LEAVE_COUNT, "minuto": Field.EARLY_LEAVE_MINUTES},
    ColumnGroup.OVERTIME: {"normal": Field.OVERTIME_WEEKDAY, "especial": Field.OVERTIME_HOLIDAY},
}

# Bare group label with no sub-header: the column carries the group's main figure.
_GROUP_DEFAULT: Mapping[ColumnGroup, Field] = {
    ColumnGroup.WORK_HOURS: Field.SCHEDULED_HOURS,
    ColumnGroup.TARDY: Field.TARDY_MINUTES,
    ColumnGroup.EARLY_LEAVE: Field.EARLY_LEAVE_MINUTES,
    ColumnGroup.OVERTIME: Field.OVERTIME_WEEKDAY,
}

# Sub-header tokens outside any group are assigned left to right.
_ORDINAL_FIELDS: Mapping[str, tuple[Field, ...]] = {
    "normal": (Field.SCHEDULED_HOURS, Field.OVERTIME_WEEKDAY),
    "real": (Field.ACTUAL_HOURS,),
    "cantidad": (Field.TARDY_COUNT, Field.EARLY_LEAVE_COUNT),
    "minuto": (Field.TARDY_MINUTES, Field.EARLY_LEAVE_MINUTES),
    "especial": (Field.OVERTIME_HOLIDAY,),
}


def normalize(value: Any) -> str:
    return " ".join(cell_text(value).lower().split())


def is_header_row(row: Sequence[Any]) -> bool:
    joined = " ".join(normalize(cell) for cell in row)
    return "id" in joined and ("nombre" in joined or "name" in joined)


def find_header_row(rows: Sequence[Sequence[Any]], *, scan_rows: int = HEADER_SCAN_ROWS) -> Optional[int]:
    for index, row in enumerate(rows[:scan_rows]):
        if is_header_row(row):
            return index
    return None


def sub_token(text: str) -> Optional[str]:
    """Canonical sub-header token of a cell, or None."""

    for word in _WORD_RE.findall(text):
        if word in _EXACT_SUB_TOKENS:
            return _EXACT_SUB_TOKENS[word]
        for prefix, canonical in _SUB_TOKENS:
            if word.startswith(prefix):
                return canonical
    return None


def count_sub_tokens(row: Sequence[Any]) -> int:
    """Cells consisting of a sub-header token and nothing that names another column."""

    count = 0
    for cell in row:
        text = normalize(cell)
        if not text or _direct_field(text) is not None or _group_of(text) is not None:
            continue
        if sub_token(text):
            count += 1
    return count


def looks_like_data_row(row: Sequence[Any], id_column: Optional[int]) -> bool:
    """True when the row carries an identifier, a number or a duration, as data rows do."""

    if id_column is not None and id_column < len(row):
        if len(cell_text(row[id_column])) >= MIN_IDENTIFIER_LENGTH:
            return True
    for cell in row:
        if isinstance(cell, bool):
            continue
        if isinstance(cell, (int, float, date, time, timedelta)):
            return True
        if isinstance(cell, str) and _DATA_VALUE_RE.match(cell.strip()):
            return True
    return False


def _direct_field(text: str) -> Optional[Field]:
    if _ID_RE.search(text):
        return Field.DOCUMENT_ID
    for tokens, field in _DIRECT_LABELS:
        if any(token in text for token in tokens):
            return field
    return None


def _group_of(text: str) -> Optional[ColumnGroup]:
    for tokens, group in _GROUP_LABELS:
        if any(token in text for token in tokens):
            return group
    return None


def resolve_sub_token(token: str, group: Optional[ColumnGroup], assigned: Iterable[Field]) -> Optional[Field]:
    if group is not None and token in _GROUP_FIELDS[group]:
        return _GROUP_FIELDS[group][token]
    taken = set(assigned)
    for field in _ORDINAL_FIELDS.get(token, ()):
        if field not in taken:
            return field
    return None


def map_header_row(row: Sequence[Any]) -> tuple[dict[Field, int], list[Optional[ColumnGroup]]]:
    """Map one header row to fields; also return the group in effect per column."""

    columns: dict[Field, int] = {}
    groups: list[Optional[ColumnGroup]] = []
    group: Optional[ColumnGroup] = None

    for index, cell in enumerate(row):
        text = normalize(cell)
        if not text:
            groups.append(group)
            continue

        field = _direct_field(text)
        if field is not None:
            group = None
        else:
            label_group = _group_of(text)
            token = sub_token(text)
            if label_group is not None:
                group = label_group
                field = resolve_sub_token(token, group, columns) if token else _GROUP_DEFAULT[group]
            elif token is not None:
                field = resolve_sub_token(token, group, columns)
            else:
                group = None

        groups.append(group)
        if field is not None and field not in columns:
            columns[field] = index

    return columns, groups


def refine_with_sub_header(
    columns: Mapping[Field, int],
    groups: Sequence[Optional[ColumnGroup]],
    sub_row: Sequence[Any],
) -> dict[Field, int]:
    """Override header assignments with the more precise sub-header row."""

    refined = dict(columns)
    assigned: list[Field] = []

    for index, cell in enumerate(sub_row):
        text = normalize(cell)
        token = sub_token(text) if text else None
        if token is None:
            continue
        group = groups[index] if index < len(groups) else None
        field = resolve_sub_token(token, group, assigned)
        if field is None:
            continue
        assigned.append(field)
        for other, column in list(refined.items()):
            if column == index and other != field:
                del refined[other]
        refined[field] = index

    return refined
