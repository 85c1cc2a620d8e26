from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence

from ..access import AccessPolicy, Actor
from ..common.validators import optional_rate, require_int, require_non_empty
from ..core.enums import PayType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

# payload key -> Employee field
_RATE_FIELDS = {
    "hourlyRate": "hourly_rate",
    "fixedDailyRate": "fixed_daily_rate",
    "customHourlyRate": "custom_hourly_rate",
    "customDailyRate": "custom_daily_rate",
}
_TEXT_FIELDS = {
    "shareCode": "share_code",
    "niNumber": "ni_number",
    "address": "address",
    "phoneNumber": "phone_number",
    "shiftTiming": "shift_timing",
}


def parse_pay_type(value: Any) -> PayType:
    try:
        return PayType(str(value).strip())
    except ValueError:
        allowed = ", ".join(p.value for p in PayType)
        raise ValidationError(f"payType must be one of: {allowed}")


def _clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    v = str(value).strip()
    return v or None


class EmployeeService:
    """Use case: manage employee records and their compensation settings."""

    def __init__(self, employees: EmployeeRepository, access: AccessPolicy):
        self._employees = employees
        self._access = access

    def create(self, actor: Actor, payload: Mapping[str, Any]) -> Employee:
        name = require_non_empty(payload.get("name"), "name")
        if not payload.get("payType") or payload.get("shopId") in (None, ""):
            raise ValidationError("name, payType and shopId required")

        pay_type = parse_pay_type(payload.get("payType"))
        shop = self._access.shop(actor, require_int(payload.get("shopId"), "shopId"))

        fields: dict[str, Any] = {attr: optional_rate(payload.get(key), key) for key, attr in _RATE_FIELDS.items()}
        fields.update({attr: _clean_text(payload.get(key)) for key, attr in _TEXT_FIELDS.items()})

        emp = Employee(employee_id=0, shop_id=shop.shop_id, name=name, pay_type=pay_type, **fields)
        employee_id = self._employees.create(emp)
        logger.info("Created employee %s in shop %s", employee_id, shop.shop_id)
        return replace(emp, employee_id=employee_id)

    def get(self, actor: Actor, employee_id: int) -> Employee:
        return self._access.employee(actor, employee_id)

    def list_visible(self, actor: Actor, *, shop_id: Optional[int] = None) -> Sequence[Employee]:
        return self._access.visible_employees(actor, shop_id=shop_id)

    def update(self, actor: Actor, employee_id: int, payload: Mapping[str, Any]) -> Employee:
        """Partial update. A rate key sent as null clears that rate."""

        emp = self._access.employee(actor, employee_id)
        changes: dict[str, Any] = {}

        if "name" in payload:
            changes["name"] = require_non_empty(payload.get("name"), "name")
        if "payType" in payload:
            changes["pay_type"] = parse_pay_type(payload.get("payType"))
        if "shopId" in payload:
            changes["shop_id"] = self._access.shop(actor, require_int(payload.get("shopId"), "shopId")).shop_id

        for key, attr in _RATE_FIELDS.items():
            if key in payload:
                changes[attr] = optional_rate(payload.get(key), key)
        for key, attr in _TEXT_FIELDS.items():
            if key in payload:
                changes[attr] = _clean_text(payload.get(key))

        if not changes:
            return emp

        updated = replace(emp, **changes)
        self._employees.update(updated)
        return updated

    def delete(self, actor: Actor, employee_id: int) -> None:
        emp = self._access.employee(actor, employee_id)
        if not self._employees.delete_by_id(emp.employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", emp.employee_id)
