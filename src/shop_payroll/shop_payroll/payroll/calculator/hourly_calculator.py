from __future__ import annotations

from ...employees.model import CompensationConfig
from .base import SalaryCalculator


class HourlySalaryCalculator(SalaryCalculator):
    """Hourly rule: total hours x effective hourly rate. Daily rates are ignored."""

    def salary(self, *, total_hours: float, total_days: int, compensation: CompensationConfig) -> float:
        return total_hours * compensation.effective_hourly_rate
