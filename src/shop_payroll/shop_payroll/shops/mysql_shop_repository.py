from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_hhmm
from .model import Shop
from .repository import ShopRepository

_COLUMNS = "shop_id, name, admin_id, address, site, phone_number, rent, bills, open_time, close_time"


def _to_shop(r: Dict[str, Any]) -> Shop:
    return Shop(
        shop_id=int(r["shop_id"]),
        name=r["name"],
        admin_id=int(r["admin_id"]),
        address=r.get("address"),
        site=r.get("site"),
        phone_number=r.get("phone_number"),
        rent=float(r.get("rent") or 0),
        bills=float(r.get("bills") or 0),
        open_time=normalize_hhmm(r.get("open_time")),
        close_time=normalize_hhmm(r.get("close_time")),
    )


class MySQLShopRepository(ShopRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, shop_id: int) -> Optional[Shop]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shops WHERE shop_id=%s", (int(shop_id),))
            r = fetchone(cur)
            return _to_shop(r) if r else None

    def list_by_admin(self, admin_id: int) -> Sequence[Shop]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shops WHERE admin_id=%s ORDER BY shop_id", (int(admin_id),))
            return [_to_shop(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Shop]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shops ORDER BY shop_id")
            return [_to_shop(r) for r in fetchall(cur)]

    def create(self, shop: Shop) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shops(name, admin_id, address, site, phone_number, rent, bills, open_time, close_time)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    shop.name,
                    int(shop.admin_id),
                    shop.address,
                    shop.site,
                    shop.phone_number,
                    shop.rent,
                    shop.bills,
                    shop.open_time,
                    shop.close_time,
                ),
            )
            return int(cur.lastrowid)
