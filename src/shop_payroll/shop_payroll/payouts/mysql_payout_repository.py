from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_date, db_cursor, fetchall
from .model import PaymentPayout
from .repository import PayoutRepository


def _to_payout(r: Dict[str, Any]) -> PaymentPayout:
    return PaymentPayout(
        payout_id=int(r["payout_id"]),
        employee_id=int(r["employee_id"]),
        payout_date=as_date(r["payout_date"]),
        amount_paid=float(r["amount_paid"]),
        period_start=as_date(r["period_start"]),
        period_end=as_date(r["period_end"]),
    )


class MySQLPayoutRepository(PayoutRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(
        self,
        *,
        employee_id: int,
        payout_date: date,
        amount_paid: float,
        period_start: date,
        period_end: date,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payouts(employee_id, payout_date, amount_paid, period_start, period_end)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), payout_date, amount_paid, period_start, period_end),
            )
            return int(cur.lastrowid)

    def list_filtered(
        self,
        *,
        employee_ids: Optional[Sequence[int]] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[PaymentPayout]:
        clauses: list[str] = []
        params: list[object] = []

        if employee_ids is not None:
            if not employee_ids:
                return []
            clauses.append(f"employee_id IN ({', '.join(['%s'] * len(employee_ids))})")
            params.extend(int(e) for e in employee_ids)
        if start is not None:
            clauses.append("payout_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("payout_date <= %s")
            params.append(end)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT payout_id, employee_id, payout_date, amount_paid, period_start, period_end
                FROM payouts
                {where}
                ORDER BY payout_date DESC, payout_id DESC
                """,
                tuple(params),
            )
            return [_to_payout(r) for r in fetchall(cur)]
