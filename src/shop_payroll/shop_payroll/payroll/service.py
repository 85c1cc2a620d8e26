from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from ..attendance.reconciler import AttendanceReconciler
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.factory import SalaryCalculatorFactory
from .model import PayrollResult

logger = logging.getLogger(__name__)


class PayrollService:
    """Turn reconciled attendance into pay.

    Read-only: nothing computed here is written back or cached, so two calls
    over the same range can differ while an employee is still clocked in.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        reconciler: AttendanceReconciler,
        *,
        calculator_factory: Optional[SalaryCalculatorFactory] = None,
    ):
        self._employees = employees
        self._reconciler = reconciler
        self._factory = calculator_factory or SalaryCalculatorFactory()

    def compute_total(self, employee_id: int, start: datetime, end: datetime) -> PayrollResult:
        """Totals only (list/summary use)."""
        return self._compute(self._get_employee(employee_id), start, end, include_breakdown=False)

    def compute_breakdown(self, employee_id: int, start: datetime, end: datetime) -> PayrollResult:
        """Totals plus the ordered day-by-day ledger."""
        return self._compute(self._get_employee(employee_id), start, end, include_breakdown=True)

    def compute_all_totals(
        self,
        start: datetime,
        end: datetime,
        *,
        employees: Optional[Iterable[Employee]] = None,
    ) -> list[PayrollResult]:
        """compute_total for every employee (or the given ones) over one shared range."""
        targets = list(employees) if employees is not None else list(self._employees.list_all())
        return [self._compute(emp, start, end, include_breakdown=False) for emp in targets]

    def _get_employee(self, employee_id: int) -> Employee:
        emp = self._employees.get_by_id(int(employee_id))
        if not emp:
            raise NotFoundError("Employee not found")
        return emp

    def _compute(self, emp: Employee, start: datetime, end: datetime, *, include_breakdown: bool) -> PayrollResult:
        if start is None or end is None:
            raise ValidationError("from and to are required")
        if end < start:
            raise ValidationError("'to' must not be before 'from'")

        records = self._reconciler.reconcile(emp.employee_id, start, end)
        compensation = emp.compensation()

        total_hours = sum(r.hours for r in records)
        total_days = len(records)
        salary = self._factory.for_pay_type(compensation.pay_type).salary(
            total_hours=total_hours,
            total_days=total_days,
            compensation=compensation,
        )

        logger.debug(
            "Payroll employee=%s %s..%s hours=%.4f days=%d salary=%.2f",
            emp.employee_id, start, end, total_hours, total_days, salary,
        )

        return PayrollResult(
            employee_id=emp.employee_id,
            employee_name=emp.name,
            pay_type=compensation.pay_type,
            hourly_rate=compensation.effective_hourly_rate,
            daily_rate=compensation.effective_daily_rate,
            total_hours=total_hours,
            total_days=total_days,
            salary=salary,
            include_breakdown=include_breakdown,
            daily_breakdown=tuple(records) if include_breakdown else (),
        )
