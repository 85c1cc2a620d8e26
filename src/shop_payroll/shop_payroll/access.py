"""Role gate: which shops and employees a back-office account may touch.

Admin sees everything. A ShopAdmin sees only shops whose ``admin_id`` is their
own account and the employees of those shops. The payroll engine itself has
no notion of the caller; controllers resolve access here first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .core.enums import Role
from .core.exceptions import AuthorizationError, NotFoundError
from .employees.model import Employee
from .employees.repository import EmployeeRepository
from .shops.model import Shop
from .shops.repository import ShopRepository


@dataclass(frozen=True)
class Actor:
    admin_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class AccessPolicy:
    def __init__(self, shops: ShopRepository, employees: EmployeeRepository):
        self._shops = shops
        self._employees = employees

    def require_admin(self, actor: Actor) -> None:
        if not actor.is_admin:
            raise AuthorizationError("Admin only route")

    def shop(self, actor: Actor, shop_id: int) -> Shop:
        shop = self._shops.get_by_id(int(shop_id))
        if not shop:
            raise NotFoundError("Shop not found")
        if not actor.is_admin and shop.admin_id != actor.admin_id:
            raise AuthorizationError("Forbidden: you do not manage this shop")
        return shop

    def employee(self, actor: Actor, employee_id: int) -> Employee:
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError("Employee not found")
        if not actor.is_admin:
            shop = self._shops.get_by_id(emp.shop_id)
            if not shop or shop.admin_id != actor.admin_id:
                raise AuthorizationError("Forbidden")
        return emp

    def visible_shops(self, actor: Actor) -> Sequence[Shop]:
        if actor.is_admin:
            return self._shops.list_all()
        return self._shops.list_by_admin(actor.admin_id)

    def visible_employees(self, actor: Actor, *, shop_id: Optional[int] = None) -> Sequence[Employee]:
        if shop_id is not None:
            self.shop(actor, shop_id)
            return self._employees.list_for_shops([int(shop_id)])
        if actor.is_admin:
            return self._employees.list_all()
        return self._employees.list_for_shops([s.shop_id for s in self._shops.list_by_admin(actor.admin_id)])
