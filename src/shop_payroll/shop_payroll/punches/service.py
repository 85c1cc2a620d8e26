from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..access import AccessPolicy, Actor
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import TimePunch
from .repository import PunchRepository

logger = logging.getLogger(__name__)


class PunchService:
    """Use case: record clock punches for employees of a shop."""

    def __init__(self, punches: PunchRepository, employees: EmployeeRepository, access: AccessPolicy):
        self._punches = punches
        self._employees = employees
        self._access = access

    def punch_in(self, actor: Actor, *, shop_id: int, employee_id: int, punch_in: datetime) -> TimePunch:
        shop = self._access.shop(actor, shop_id)

        emp = self._employees.get_by_id(int(employee_id))
        if not emp or emp.shop_id != shop.shop_id:
            raise ValidationError("Employee not found in this shop")

        punch_id = self._punches.create_punch_in(shop_id=shop.shop_id, employee_id=emp.employee_id, punch_in=punch_in)
        logger.info("Punch-in %s for employee %s at %s", punch_id, emp.employee_id, punch_in.isoformat())
        return TimePunch(punch_id=punch_id, shop_id=shop.shop_id, employee_id=emp.employee_id, punch_in=punch_in)

    def punch_out(self, actor: Actor, *, punch_id: int, punch_out: datetime) -> TimePunch:
        punch = self._punches.get_by_id(int(punch_id))
        if not punch:
            raise NotFoundError("Punching not found")
        self._access.shop(actor, punch.shop_id)

        # Out before in is stored as given; the reconciler clamps it to zero hours.
        if punch_out < punch.punch_in:
            logger.warning("Punch %s: punch-out %s is before punch-in %s", punch.punch_id, punch_out, punch.punch_in)

        self._punches.set_punch_out(punch_id=punch.punch_id, punch_out=punch_out)
        return TimePunch(
            punch_id=punch.punch_id,
            shop_id=punch.shop_id,
            employee_id=punch.employee_id,
            punch_in=punch.punch_in,
            punch_out=punch_out,
        )

    def list_punches(
        self,
        actor: Actor,
        *,
        shop_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[TimePunch]:
        if shop_id is not None:
            shop_ids: Optional[list[int]] = [self._access.shop(actor, shop_id).shop_id]
        elif actor.is_admin:
            shop_ids = None
        else:
            shop_ids = [s.shop_id for s in self._access.visible_shops(actor)]

        if employee_id is not None:
            self._access.employee(actor, employee_id)

        return self._punches.list_filtered(shop_ids=shop_ids, employee_id=employee_id, start=start, end=end)
