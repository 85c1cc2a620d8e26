from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import TimePunch
from .repository import PunchRepository

_COLUMNS = "punch_id, shop_id, employee_id, punch_in, punch_out"


def _to_punch(r: Dict[str, Any]) -> TimePunch:
    return TimePunch(
        punch_id=int(r["punch_id"]),
        shop_id=int(r["shop_id"]),
        employee_id=int(r["employee_id"]),
        punch_in=r["punch_in"],
        punch_out=r.get("punch_out"),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, *, employee_id: int, start: datetime, end: datetime) -> Sequence[TimePunch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM punches
                WHERE employee_id=%s AND punch_in BETWEEN %s AND %s
                ORDER BY punch_in ASC, punch_id ASC
                """,
                (int(employee_id), start, end),
            )
            return [_to_punch(r) for r in fetchall(cur)]

    def get_by_id(self, punch_id: int) -> Optional[TimePunch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM punches WHERE punch_id=%s", (int(punch_id),))
            r = fetchone(cur)
            return _to_punch(r) if r else None

    def create_punch_in(self, *, shop_id: int, employee_id: int, punch_in: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO punches(shop_id, employee_id, punch_in) VALUES(%s,%s,%s)",
                (int(shop_id), int(employee_id), punch_in),
            )
            return int(cur.lastrowid)

    def set_punch_out(self, *, punch_id: int, punch_out: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE punches SET punch_out=%s WHERE punch_id=%s", (punch_out, int(punch_id)))
            return cur.rowcount > 0

    def list_filtered(
        self,
        *,
        shop_ids: Optional[Sequence[int]] = None,
        employee_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[TimePunch]:
        clauses: list[str] = []
        params: list[object] = []

        if shop_ids is not None:
            if not shop_ids:
                return []
            clauses.append(f"shop_id IN ({', '.join(['%s'] * len(shop_ids))})")
            params.extend(int(s) for s in shop_ids)
        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if start is not None:
            clauses.append("punch_in >= %s")
            params.append(start)
        if end is not None:
            clauses.append("punch_in <= %s")
            params.append(end)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM punches {where} ORDER BY punch_in ASC, punch_id ASC", tuple(params))
            return [_to_punch(r) for r in fetchall(cur)]
