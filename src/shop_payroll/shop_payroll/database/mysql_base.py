from __future__ import annotations

from contextlib import contextmanager
from datetime import date, datetime, time, timedelta
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def optional_float(value: Any) -> Optional[float]:
    """DECIMAL/NULL columns -> float or None (NULL stays unset, 0 stays 0)."""
    if value is None:
        return None
    return float(value)


def as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def normalize_hhmm(value: Any) -> Optional[str]:
    """Normalize a stored wall-clock value to an 'HH:MM' string.

    mysql-connector can return TIME columns as datetime.time, datetime.timedelta
    or string, and legacy rows hold free 'HH:MM' text.
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value.strftime("%H:%M")

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return f"{total_seconds // 3600:02d}:{(total_seconds % 3600) // 60:02d}"

    if isinstance(value, str):
        v = value.strip()
        return v or None

    raise TypeError(f"Unsupported MySQL time value type: {type(value)!r}")
