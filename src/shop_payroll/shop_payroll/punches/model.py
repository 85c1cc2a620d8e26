from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TimePunch:
    """Domain entity: one clock-in/clock-out pair.

    ``punch_out`` is None while the employee is still clocked in.
    """

    punch_id: int
    shop_id: int
    employee_id: int
    punch_in: datetime
    punch_out: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.punch_out is None

    def to_dict(self) -> dict:
        return {
            "id": self.punch_id,
            "shopId": self.shop_id,
            "employeeId": self.employee_id,
            "punchInDatetime": self.punch_in.isoformat(),
            "punchOutDatetime": self.punch_out.isoformat() if self.punch_out else None,
        }
