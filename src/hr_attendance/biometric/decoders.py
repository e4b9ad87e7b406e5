"""Cell decoders for time-clock statistics exports.

Every decoder is lenient: blank or dash cells mean "not applicable" and decode
to zero silently, anything else that does not fit the expected shape also
decodes to zero but is reported through ``on_error`` so callers can audit it.
"""

from __future__ import annotations

import re
from datetime import datetime, time, timedelta
from typing import Any, Callable, Optional

OnError = Optional[Callable[[str], None]]

_DURATION_RE = re.compile(r"^(\d+):([0-5]\d)(?::[0-5]\d)?$")
_DAY_PAIR_RE = re.compile(r"^(\d+)\s*/\s*(\d+)$")
_EMPTY_TOKENS = {"", "-", "--"}


def cell_text(value: Any) -> str:
    """Render a raw cell as trimmed text (numeric ids lose the ``.0`` pandas adds)."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    return str(value).strip()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() in _EMPTY_TOKENS)


def _fail(on_error: OnError, value: Any) -> None:
    if on_error is not None:
        on_error(cell_text(value))


def decode_duration(value: Any, on_error: OnError = None) -> int:
    """``"63:33"`` -> 3813 minutes. Hours may exceed 24 (period totals)."""

    if _is_blank(value):
        return 0
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds() // 60)
        if minutes < 0:
            _fail(on_error, value)
            return 0
        return minutes
    if isinstance(value, (int, float)) and not isinstance(value, bool) and value == 0:
        return 0

    match = _DURATION_RE.match(cell_text(value))
    if not match:
        _fail(on_error, value)
        return 0
    return int(match.group(1)) * 60 + int(match.group(2))


def decode_day_pair(value: Any, on_error: OnError = None) -> tuple[int, int]:
    """``"10/9"`` -> (scheduled=10, actual=9)."""

    if _is_blank(value):
        return 0, 0
    match = _DAY_PAIR_RE.match(cell_text(value))
    if not match:
        _fail(on_error, value)
        return 0, 0
    return int(match.group(1)), int(match.group(2))


def decode_count(value: Any, on_error: OnError = None) -> int:
    if _is_blank(value):
        return 0
    if isinstance(value, bool):
        _fail(on_error, value)
        return 0
    if isinstance(value, int):
        number = value
    else:
        try:
            as_float = float(cell_text(value))
        except ValueError:
            _fail(on_error, value)
            return 0
        if not as_float.is_integer():
            _fail(on_error, value)
            return 0
        number = int(as_float)
    if number < 0:
        _fail(on_error, value)
        return 0
    return number


def decode_name(value: Any) -> str:
    """Terminals store spaces as ``~``: ``"JUAN~CARLOS~PEREZ"`` -> ``"JUAN CARLOS PEREZ"``."""

    return " ".join(cell_text(value).replace("~", " ").split())


def decode_minutes(value: Any, on_error: OnError = None) -> int:
    """Minute columns hold either a plain count (``15``) or a duration (``0:15``)."""

    if isinstance(value, bool):
        _fail(on_error, value)
        return 0
    if isinstance(value, int) or (isinstance(value, float) and value.is_integer()):
        if value < 0:
            _fail(on_error, value)
            return 0
        return int(value)
    text = "" if _is_blank(value) else cell_text(value)
    if text.isdigit():
        return int(text)
    return decode_duration(value, on_error)
