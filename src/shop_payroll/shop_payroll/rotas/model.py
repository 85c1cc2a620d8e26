from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class ScheduledShift:
    """Domain entity: a rota entry (planned shift) for one employee on one day.

    ``scheduled_start``/``scheduled_end`` are local 'HH:MM' strings; either may be
    missing when the entry only marks the day.
    """

    rota_id: int
    shop_id: int
    employee_id: int
    shift_date: date
    scheduled_start: Optional[str] = None
    scheduled_end: Optional[str] = None
    note: Optional[str] = None

    @property
    def has_times(self) -> bool:
        return bool(self.scheduled_start) and bool(self.scheduled_end)

    def to_dict(self) -> dict:
        return {
            "id": self.rota_id,
            "shopId": self.shop_id,
            "employeeId": self.employee_id,
            "shiftDate": self.shift_date.isoformat(),
            "scheduledStart": self.scheduled_start,
            "scheduledEnd": self.scheduled_end,
            "note": self.note,
        }
