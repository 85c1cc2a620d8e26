from __future__ import annotations

from ...employees.model import CompensationConfig
from .base import SalaryCalculator


class FixedDailySalaryCalculator(SalaryCalculator):
    """Fixed daily rule: reconciled days x effective daily rate.

    A zero-hour day (rota entry without times) still counts as a day.
    """

    def salary(self, *, total_hours: float, total_days: int, compensation: CompensationConfig) -> float:
        return total_days * compensation.effective_daily_rate
