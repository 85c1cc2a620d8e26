from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PayType


def effective_rate(override: Optional[float], base: Optional[float]) -> float:
    """Two-level fallback: override if set, else base if set, else 0.

    "Set" means not None; an override of 0 is a real rate.
    """
    if override is not None:
        return float(override)
    if base is not None:
        return float(base)
    return 0.0


@dataclass(frozen=True)
class CompensationConfig:
    """Pay type plus base/override rates of one employee."""

    pay_type: PayType
    hourly_rate: Optional[float] = None
    daily_rate: Optional[float] = None
    custom_hourly_rate: Optional[float] = None
    custom_daily_rate: Optional[float] = None

    @property
    def effective_hourly_rate(self) -> float:
        return effective_rate(self.custom_hourly_rate, self.hourly_rate)

    @property
    def effective_daily_rate(self) -> float:
        return effective_rate(self.custom_daily_rate, self.daily_rate)


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee of one shop."""

    employee_id: int
    shop_id: int
    name: str
    pay_type: PayType
    hourly_rate: Optional[float] = None
    fixed_daily_rate: Optional[float] = None
    custom_hourly_rate: Optional[float] = None
    custom_daily_rate: Optional[float] = None
    share_code: Optional[str] = None
    ni_number: Optional[str] = None
    address: Optional[str] = None
    phone_number: Optional[str] = None
    shift_timing: Optional[str] = None

    def compensation(self) -> CompensationConfig:
        return CompensationConfig(
            pay_type=self.pay_type,
            hourly_rate=self.hourly_rate,
            daily_rate=self.fixed_daily_rate,
            custom_hourly_rate=self.custom_hourly_rate,
            custom_daily_rate=self.custom_daily_rate,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "shopId": self.shop_id,
            "name": self.name,
            "payType": self.pay_type.value,
            "hourlyRate": self.hourly_rate,
            "fixedDailyRate": self.fixed_daily_rate,
            "customHourlyRate": self.custom_hourly_rate,
            "customDailyRate": self.custom_daily_rate,
            "shareCode": self.share_code,
            "niNumber": self.ni_number,
            "address": self.address,
            "phoneNumber": self.phone_number,
            "shiftTiming": self.shift_timing,
        }
