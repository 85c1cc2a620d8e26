from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Shop:
    """Domain entity: a shop, managed by exactly one ShopAdmin account."""

    shop_id: int
    name: str
    admin_id: int
    address: Optional[str] = None
    site: Optional[str] = None
    phone_number: Optional[str] = None
    rent: float = 0.0
    bills: float = 0.0
    open_time: Optional[str] = None
    close_time: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.shop_id,
            "name": self.name,
            "adminId": self.admin_id,
            "address": self.address,
            "site": self.site,
            "phoneNumber": self.phone_number,
            "rent": self.rent,
            "bills": self.bills,
            "shopOpenTime": self.open_time,
            "shopCloseTime": self.close_time,
        }
