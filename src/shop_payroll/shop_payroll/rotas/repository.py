from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import ScheduledShift


class RotaRepository(Protocol):
    def list_for_employee(self, *, employee_id: int, start: datetime, end: datetime) -> Sequence[ScheduledShift]:
        """Rota entries of one employee whose shift date lies in [start, end] (inclusive)."""

        raise NotImplementedError

    def get_by_id(self, rota_id: int) -> Optional[ScheduledShift]:
        raise NotImplementedError

    def create(
        self,
        *,
        shop_id: int,
        employee_id: int,
        shift_date: date,
        scheduled_start: Optional[str] = None,
        scheduled_end: Optional[str] = None,
        note: Optional[str] = None,
    ) -> int:
        raise NotImplementedError

    def update(self, shift: ScheduledShift) -> bool:
        """Overwrite date, times and note of an existing entry."""

        raise NotImplementedError

    def delete(self, *, rota_id: int) -> bool:
        raise NotImplementedError

    def list_filtered(
        self,
        *,
        shop_ids: Optional[Sequence[int]] = None,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[ScheduledShift]:
        raise NotImplementedError
