from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import TimePunch


class PunchRepository(Protocol):
    def list_for_employee(self, *, employee_id: int, start: datetime, end: datetime) -> Sequence[TimePunch]:
        """Punches of one employee whose punch-in lies in [start, end] (inclusive)."""

        raise NotImplementedError

    def get_by_id(self, punch_id: int) -> Optional[TimePunch]:
        raise NotImplementedError

    def create_punch_in(self, *, shop_id: int, employee_id: int, punch_in: datetime) -> int:
        raise NotImplementedError

    def set_punch_out(self, *, punch_id: int, punch_out: datetime) -> bool:
        raise NotImplementedError

    def list_filtered(
        self,
        *,
        shop_ids: Optional[Sequence[int]] = None,
        employee_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> Sequence[TimePunch]:
        raise NotImplementedError
