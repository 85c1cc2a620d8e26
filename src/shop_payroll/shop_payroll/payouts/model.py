from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class PaymentPayout:
    """Domain entity: money actually handed to an employee for a period.

    Entered by a user; it is a fact on its own and is not checked against the
    computed salary for that period.
    """

    payout_id: int
    employee_id: int
    payout_date: date
    amount_paid: float
    period_start: date
    period_end: date

    def to_dict(self) -> dict:
        return {
            "id": self.payout_id,
            "employeeId": self.employee_id,
            "payoutDate": self.payout_date.isoformat(),
            "amountPaid": self.amount_paid,
            "payoutStartDate": self.period_start.isoformat(),
            "payoutEndDate": self.period_end.isoformat(),
        }
