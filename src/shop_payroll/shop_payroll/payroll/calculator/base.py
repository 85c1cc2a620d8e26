from __future__ import annotations

from abc import ABC, abstractmethod

from ...employees.model import CompensationConfig


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern, one per pay type)."""

    @abstractmethod
    def salary(self, *, total_hours: float, total_days: int, compensation: CompensationConfig) -> float:
        raise NotImplementedError
