from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..attendance.model import DailyAttendanceRecord
from ..core.enums import PayType


@dataclass(frozen=True)
class PayrollResult:
    """Computed pay for one employee over one range. Never persisted."""

    employee_id: int
    employee_name: str
    pay_type: PayType
    hourly_rate: float
    daily_rate: float
    total_hours: float
    total_days: int
    salary: float
    include_breakdown: bool = False
    daily_breakdown: Sequence[DailyAttendanceRecord] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        out = {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "payType": self.pay_type.value,
            "hourlyRate": self.hourly_rate,
            "dailyRate": self.daily_rate,
            "totalHours": self.total_hours,
            "totalDays": self.total_days,
            "salary": self.salary,
        }
        if self.include_breakdown:
            out["dailyBreakdown"] = [r.to_dict() for r in self.daily_breakdown]
        return out
