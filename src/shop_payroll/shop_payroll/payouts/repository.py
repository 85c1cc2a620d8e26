from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PaymentPayout


class PayoutRepository(Protocol):
    def create(
        self,
        *,
        employee_id: int,
        payout_date: date,
        amount_paid: float,
        period_start: date,
        period_end: date,
    ) -> int:
        raise NotImplementedError

    def list_filtered(
        self,
        *,
        employee_ids: Optional[Sequence[int]] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[PaymentPayout]:
        """Payouts filtered by employee and by payout date (inclusive)."""

        raise NotImplementedError
