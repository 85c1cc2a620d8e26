from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles of back-office accounts."""

    ADMIN = "Admin"
    SHOP_ADMIN = "ShopAdmin"


class PayType(str, Enum):
    """Compensation model of an employee."""

    HOURLY = "Hourly"
    FIXED_DAILY = "Fixed Daily"


class AttendanceSource(str, Enum):
    """Where a reconciled day got its hours from."""

    FROM_PUNCH = "FromPunch"
    FROM_SCHEDULE = "FromSchedule"
    SCHEDULE_NO_TIME = "ScheduleNoTime"
