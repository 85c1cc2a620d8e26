from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Sequence

from ..access import AccessPolicy, Actor
from ..common.datetime_utils import parse_hhmm
from ..common.validators import optional_rate, optional_str, require_int, require_non_empty
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.repository import AdminRepository
from .model import Shop
from .repository import ShopRepository


class ShopService:
    """Use case: register shops and hand each one to a ShopAdmin account."""

    def __init__(self, shops: ShopRepository, admins: AdminRepository, access: AccessPolicy):
        self._shops = shops
        self._admins = admins
        self._access = access

    def create(self, actor: Actor, payload: Mapping[str, Any]) -> Shop:
        self._access.require_admin(actor)

        name = require_non_empty(payload.get("name"), "name")
        admin_id = require_int(payload.get("adminId"), "adminId")
        owner = self._admins.get_by_id(admin_id)
        if not owner or owner.role != Role.SHOP_ADMIN:
            raise ValidationError("adminId must reference a ShopAdmin account")

        def hhmm(key: str):
            v = optional_str(payload.get(key), key)
            return parse_hhmm(v).strftime("%H:%M") if v else None

        shop = Shop(
            shop_id=0,
            name=name,
            admin_id=owner.admin_id,
            address=optional_str(payload.get("address"), "address"),
            site=optional_str(payload.get("site"), "site"),
            phone_number=optional_str(payload.get("phoneNumber"), "phoneNumber"),
            rent=optional_rate(payload.get("rent"), "rent") or 0.0,
            bills=optional_rate(payload.get("bills"), "bills") or 0.0,
            open_time=hhmm("shopOpenTime"),
            close_time=hhmm("shopCloseTime"),
        )
        shop_id = self._shops.create(shop)
        return replace(shop, shop_id=shop_id)

    def list_visible(self, actor: Actor) -> Sequence[Shop]:
        return self._access.visible_shops(actor)
