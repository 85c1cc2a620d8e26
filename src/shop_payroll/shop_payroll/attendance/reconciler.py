from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import Clock, anchor_hhmm, hours_between, now_local
from ..core.constants import NO_SCHEDULED_TIME_NOTE
from ..core.enums import AttendanceSource
from ..core.exceptions import ValidationError
from ..punches.repository import PunchRepository
from ..rotas.model import ScheduledShift
from ..rotas.repository import RotaRepository
from .model import DailyAttendanceRecord

logger = logging.getLogger(__name__)


@dataclass
class _PunchDay:
    hours: float
    first_in: datetime
    last_out: datetime

    def add(self, punch_in: datetime, punch_out: datetime, hours: float) -> None:
        self.hours += hours
        self.first_in = min(self.first_in, punch_in)
        self.last_out = max(self.last_out, punch_out)

    def to_record(self, day: date) -> DailyAttendanceRecord:
        return DailyAttendanceRecord(
            work_date=day,
            hours=self.hours,
            source=AttendanceSource.FROM_PUNCH,
            punch_in=self.first_in,
            punch_out=self.last_out,
        )


class AttendanceReconciler:
    """Merge clock punches and rota entries into one record per calendar day.

    Rules:
    - punches win: any punch on a day suppresses every rota entry for that day
    - several punches on a day are summed into one FROM_PUNCH record
    - an open punch (no punch-out) counts up to ``clock()``, so results for an
      employee who is still clocked in grow with the query time
    - a rota entry with both times gives FROM_SCHEDULE hours; a missing time
      gives a zero-hour SCHEDULE_NO_TIME day
    - hours never go negative; an overnight rota entry (end < start) is not
      wrapped to the next day and yields 0 hours
    - days with neither punch nor rota entry produce no record
    """

    def __init__(self, punches: PunchRepository, rotas: RotaRepository, *, clock: Optional[Clock] = None):
        self._punches = punches
        self._rotas = rotas
        self._clock = clock or now_local

    def reconcile(self, employee_id: int, start: datetime, end: datetime) -> list[DailyAttendanceRecord]:
        now = self._clock()
        days: dict[date, DailyAttendanceRecord] = {}

        punch_days: dict[date, _PunchDay] = {}
        for p in self._punches.list_for_employee(employee_id=employee_id, start=start, end=end):
            punch_out = p.punch_out or now
            hours = hours_between(p.punch_in, punch_out)
            day = p.punch_in.date()

            bucket = punch_days.get(day)
            if bucket is None:
                punch_days[day] = _PunchDay(hours=hours, first_in=p.punch_in, last_out=punch_out)
            else:
                bucket.add(p.punch_in, punch_out, hours)

        for day, bucket in punch_days.items():
            days[day] = bucket.to_record(day)

        for shift in self._rotas.list_for_employee(employee_id=employee_id, start=start, end=end):
            if shift.shift_date in days:
                continue

            record = self._from_shift(shift)
            if record is not None:
                days[shift.shift_date] = record

        logger.debug(
            "Reconciled employee %s over %s..%s: %d day(s), %d from punches",
            employee_id, start, end, len(days), len(punch_days),
        )
        return [days[d] for d in sorted(days)]

    @staticmethod
    def _from_shift(shift: ScheduledShift) -> Optional[DailyAttendanceRecord]:
        if not shift.has_times:
            return DailyAttendanceRecord(
                work_date=shift.shift_date,
                hours=0.0,
                source=AttendanceSource.SCHEDULE_NO_TIME,
                note=NO_SCHEDULED_TIME_NOTE,
            )

        try:
            start = anchor_hhmm(shift.shift_date, shift.scheduled_start)
            end = anchor_hhmm(shift.shift_date, shift.scheduled_end)
        except ValidationError as e:
            logger.warning("Skipping rota %s on %s: %s", shift.rota_id, shift.shift_date, e)
            return None

        return DailyAttendanceRecord(
            work_date=shift.shift_date,
            hours=hours_between(start, end),
            source=AttendanceSource.FROM_SCHEDULE,
            scheduled_start=shift.scheduled_start,
            scheduled_end=shift.scheduled_end,
        )
