from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from .connection import DatabaseConnection


@contextmanager
def read_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor on a fresh connection; read-only, so nothing is committed."""

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=True)
        try:
            yield cur
        finally:
            cur.close()
    finally:
        conn.close()


def fetch_dicts(cur) -> List[Dict[str, Any]]:
    return [dict(row) for row in cur.fetchall() or []]
