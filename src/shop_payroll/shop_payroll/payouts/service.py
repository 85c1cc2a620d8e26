from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..access import AccessPolicy, Actor
from ..core.exceptions import ValidationError
from .model import PaymentPayout
from .repository import PayoutRepository

logger = logging.getLogger(__name__)


class PayoutService:
    """Use case: record and list payouts."""

    def __init__(self, payouts: PayoutRepository, access: AccessPolicy):
        self._payouts = payouts
        self._access = access

    def record(
        self,
        actor: Actor,
        *,
        employee_id: int,
        payout_date: date,
        amount_paid: float,
        period_start: date,
        period_end: date,
    ) -> PaymentPayout:
        emp = self._access.employee(actor, employee_id)

        if amount_paid <= 0:
            raise ValidationError("amountPaid must be greater than 0")
        if period_end < period_start:
            raise ValidationError("payoutEndDate must not be before payoutStartDate")

        payout_id = self._payouts.create(
            employee_id=emp.employee_id,
            payout_date=payout_date,
            amount_paid=amount_paid,
            period_start=period_start,
            period_end=period_end,
        )
        logger.info("Recorded payout %s of %.2f for employee %s", payout_id, amount_paid, emp.employee_id)
        return PaymentPayout(
            payout_id=payout_id,
            employee_id=emp.employee_id,
            payout_date=payout_date,
            amount_paid=amount_paid,
            period_start=period_start,
            period_end=period_end,
        )

    def list_payouts(
        self,
        actor: Actor,
        *,
        employee_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[PaymentPayout]:
        if employee_id is not None:
            employee_ids: Optional[list[int]] = [self._access.employee(actor, employee_id).employee_id]
        elif actor.is_admin:
            employee_ids = None
        else:
            employee_ids = [e.employee_id for e in self._access.visible_employees(actor)]

        return self._payouts.list_filtered(employee_ids=employee_ids, start=start, end=end)
