from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import AdminUser
from .repository import AdminRepository


def _to_admin(r: Dict[str, Any]) -> AdminUser:
    return AdminUser(
        admin_id=int(r["admin_id"]),
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        role=Role(r["role"]),
    )


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, admin_id: int) -> Optional[AdminUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, name, email, password_hash, role FROM admins WHERE admin_id=%s",
                (int(admin_id),),
            )
            r = fetchone(cur)
            return _to_admin(r) if r else None

    def get_by_email(self, email: str) -> Optional[AdminUser]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, name, email, password_hash, role FROM admins WHERE email=%s",
                (email.strip().lower(),),
            )
            r = fetchone(cur)
            return _to_admin(r) if r else None

    def create(self, *, name: str, email: str, password_hash: str, role: Role) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO admins(name, email, password_hash, role) VALUES(%s,%s,%s,%s)",
                (name, email.strip().lower(), password_hash, role.value),
            )
            return int(cur.lastrowid)
