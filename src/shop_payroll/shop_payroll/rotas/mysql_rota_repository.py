from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall, fetchone, normalize_hhmm
from .model import ScheduledShift
from .repository import RotaRepository

_COLUMNS = "rota_id, shop_id, employee_id, shift_date, scheduled_start, scheduled_end, note"


def _to_shift(r: Dict[str, Any]) -> ScheduledShift:
    return ScheduledShift(
        rota_id=int(r["rota_id"]),
        shop_id=int(r["shop_id"]),
        employee_id=int(r["employee_id"]),
        shift_date=as_date(r["shift_date"]),
        scheduled_start=normalize_hhmm(r.get("scheduled_start")),
        scheduled_end=normalize_hhmm(r.get("scheduled_end")),
        note=r.get("note"),
    )


class MySQLRotaRepository(RotaRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, *, employee_id: int, start: datetime, end: datetime) -> Sequence[ScheduledShift]:
        # DATE vs DATETIME comparison: shift_date counts as midnight of that day.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM rotas
                WHERE employee_id=%s AND shift_date BETWEEN %s AND %s
                ORDER BY shift_date ASC, rota_id ASC
                """,
                (int(employee_id), start, end),
            )
            return [_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, rota_id: int) -> Optional[ScheduledShift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM rotas WHERE rota_id=%s", (int(rota_id),))
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def create(
        self,
        *,
        shop_id: int,
        employee_id: int,
        shift_date: date,
        scheduled_start: Optional[str] = None,
        scheduled_end: Optional[str] = None,
        note: Optional[str] = None,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO rotas(shop_id, employee_id, shift_date, scheduled_start, scheduled_end, note)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(shop_id), int(employee_id), shift_date, scheduled_start, scheduled_end, note),
            )
            return int(cur.lastrowid)

    def update(self, shift: ScheduledShift) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE rotas
                SET shift_date=%s, scheduled_start=%s, scheduled_end=%s, note=%s
                WHERE rota_id=%s
                """,
                (shift.shift_date, shift.scheduled_start, shift.scheduled_end, shift.note, int(shift.rota_id)),
            )
            return cur.rowcount > 0

    def delete(self, *, rota_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM rotas WHERE rota_id=%s", (int(rota_id),))
            return cur.rowcount > 0

    def list_filtered(
        self,
        *,
        shop_ids: Optional[Sequence[int]] = None,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[ScheduledShift]:
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
            clauses.append("shift_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("shift_date <= %s")
            params.append(end)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM rotas {where} ORDER BY shift_date ASC, rota_id ASC", tuple(params))
            return [_to_shift(r) for r in fetchall(cur)]
