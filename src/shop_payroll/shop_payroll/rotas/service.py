from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional, Sequence

from ..access import AccessPolicy, Actor
from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import ScheduledShift
from .repository import RotaRepository


class RotaService:
    """Use case: plan shifts (rota) for employees of a shop."""

    def __init__(self, rotas: RotaRepository, employees: EmployeeRepository, access: AccessPolicy):
        self._rotas = rotas
        self._employees = employees
        self._access = access

    @staticmethod
    def _clean_hhmm(value: Any) -> Optional[str]:
        v = str(value).strip() if value is not None else ""
        if not v:
            return None
        return parse_hhmm(v).strftime("%H:%M")

    @staticmethod
    def _clean_note(value: Any) -> Optional[str]:
        v = str(value).strip() if value is not None else ""
        return v or None

    def assign(
        self,
        actor: Actor,
        *,
        shop_id: int,
        employee_id: int,
        shift_date: date,
        scheduled_start: Optional[str] = None,
        scheduled_end: Optional[str] = None,
        note: Optional[str] = None,
    ) -> ScheduledShift:
        shop = self._access.shop(actor, shop_id)

        emp = self._employees.get_by_id(int(employee_id))
        if not emp or emp.shop_id != shop.shop_id:
            raise ValidationError("Employee not found in this shop")

        start = self._clean_hhmm(scheduled_start)
        end = self._clean_hhmm(scheduled_end)
        note = self._clean_note(note)

        rota_id = self._rotas.create(
            shop_id=shop.shop_id,
            employee_id=emp.employee_id,
            shift_date=shift_date,
            scheduled_start=start,
            scheduled_end=end,
            note=note,
        )
        return ScheduledShift(
            rota_id=rota_id,
            shop_id=shop.shop_id,
            employee_id=emp.employee_id,
            shift_date=shift_date,
            scheduled_start=start,
            scheduled_end=end,
            note=note,
        )

    def update(self, actor: Actor, *, rota_id: int, payload: Mapping[str, Any]) -> ScheduledShift:
        """Partial update of date, times and note. A time sent as null clears it."""

        rota = self._get_owned(actor, rota_id)
        changes: dict[str, Any] = {}

        if "shiftDate" in payload:
            try:
                changes["shift_date"] = parse_iso_date(str(payload.get("shiftDate"))[:10])
            except ValueError:
                raise ValidationError("shiftDate must be YYYY-MM-DD")
        if "scheduledStart" in payload:
            changes["scheduled_start"] = self._clean_hhmm(payload.get("scheduledStart"))
        if "scheduledEnd" in payload:
            changes["scheduled_end"] = self._clean_hhmm(payload.get("scheduledEnd"))
        if "note" in payload:
            changes["note"] = self._clean_note(payload.get("note"))

        if not changes:
            return rota

        updated = replace(rota, **changes)
        self._rotas.update(updated)
        return updated

    def _get_owned(self, actor: Actor, rota_id: int) -> ScheduledShift:
        rota = self._rotas.get_by_id(int(rota_id))
        if not rota:
            raise NotFoundError("Rota not found")
        self._access.shop(actor, rota.shop_id)
        return rota

    def delete(self, actor: Actor, *, rota_id: int) -> None:
        rota = self._get_owned(actor, rota_id)

        if not self._rotas.delete(rota_id=rota.rota_id):
            raise NotFoundError("Rota not found")

    def list_rotas(
        self,
        actor: Actor,
        *,
        shop_id: Optional[int] = None,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[ScheduledShift]:
        if shop_id is not None:
            shop_ids: Optional[list[int]] = [self._access.shop(actor, shop_id).shop_id]
        elif actor.is_admin:
            shop_ids = None
        else:
            shop_ids = [s.shop_id for s in self._access.visible_shops(actor)]

        if employee_id is not None:
            self._access.employee(actor, employee_id)

        return self._rotas.list_filtered(shop_ids=shop_ids, employee_id=employee_id, start=start, end=end)
