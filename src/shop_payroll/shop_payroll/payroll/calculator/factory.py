from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import PayType
from ...core.exceptions import ValidationError
from .base import SalaryCalculator
from .fixed_daily_calculator import FixedDailySalaryCalculator
from .hourly_calculator import HourlySalaryCalculator


@dataclass
class SalaryCalculatorFactory:
    """Factory Pattern: choose the salary rule for a pay type."""

    def for_pay_type(self, pay_type: PayType) -> SalaryCalculator:
        if pay_type == PayType.HOURLY:
            return HourlySalaryCalculator()
        if pay_type == PayType.FIXED_DAILY:
            return FixedDailySalaryCalculator()
        raise ValidationError(f"Unsupported pay type: {pay_type!r}")
