from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceSource


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Read-model: one reconciled day of attendance for one employee.

    Computed per call, never persisted. Which optional fields are filled depends
    on ``source``: punch times for FROM_PUNCH, the rota strings for
    FROM_SCHEDULE, an explanatory ``note`` for SCHEDULE_NO_TIME.
    """

    work_date: date
    hours: float
    source: AttendanceSource
    punch_in: Optional[datetime] = None
    punch_out: Optional[datetime] = None
    scheduled_start: Optional[str] = None
    scheduled_end: Optional[str] = None
    note: Optional[str] = None

    def to_dict(self) -> dict:
        out: dict = {
            "date": self.work_date.isoformat(),
            "hours": self.hours,
            "source": self.source.value,
        }
        if self.source == AttendanceSource.FROM_PUNCH:
            out["punchIn"] = self.punch_in.isoformat() if self.punch_in else None
            out["punchOut"] = self.punch_out.isoformat() if self.punch_out else None
        elif self.source == AttendanceSource.FROM_SCHEDULE:
            out["scheduledStart"] = self.scheduled_start
            out["scheduledEnd"] = self.scheduled_end
        else:
            out["note"] = self.note
        return out
