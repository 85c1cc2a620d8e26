from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from ..core.enums import PayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_float
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, shop_id, name, pay_type,
    hourly_rate, fixed_daily_rate, custom_hourly_rate, custom_daily_rate,
    share_code, ni_number, address, phone_number, shift_timing
"""


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        shop_id=int(r["shop_id"]),
        name=r["name"],
        pay_type=PayType(r["pay_type"]),
        hourly_rate=optional_float(r.get("hourly_rate")),
        fixed_daily_rate=optional_float(r.get("fixed_daily_rate")),
        custom_hourly_rate=optional_float(r.get("custom_hourly_rate")),
        custom_daily_rate=optional_float(r.get("custom_daily_rate")),
        share_code=r.get("share_code"),
        ni_number=r.get("ni_number"),
        address=r.get("address"),
        phone_number=r.get("phone_number"),
        shift_timing=r.get("shift_timing"),
    )


def _params(e: Employee) -> tuple:
    return (
        int(e.shop_id),
        e.name,
        e.pay_type.value,
        e.hourly_rate,
        e.fixed_daily_rate,
        e.custom_hourly_rate,
        e.custom_daily_rate,
        e.share_code,
        e.ni_number,
        e.address,
        e.phone_number,
        e.shift_timing,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (int(employee_id),))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_for_shops(self, shop_ids: Iterable[int]) -> Sequence[Employee]:
        ids = [int(s) for s in shop_ids]
        if not ids:
            return []

        placeholders = ", ".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE shop_id IN ({placeholders}) ORDER BY employee_id",
                tuple(ids),
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, employee: Employee) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(
                    shop_id, name, pay_type,
                    hourly_rate, fixed_daily_rate, custom_hourly_rate, custom_daily_rate,
                    share_code, ni_number, address, phone_number, shift_timing
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(employee),
            )
            return int(cur.lastrowid)

    def update(self, employee: Employee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET shop_id=%s, name=%s, pay_type=%s,
                    hourly_rate=%s, fixed_daily_rate=%s, custom_hourly_rate=%s, custom_daily_rate=%s,
                    share_code=%s, ni_number=%s, address=%s, phone_number=%s, shift_timing=%s
                WHERE employee_id=%s
                """,
                _params(employee) + (int(employee.employee_id),),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (int(employee_id),))
            return cur.rowcount > 0
