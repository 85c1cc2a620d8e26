from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import current_actor, json_body, login_required, query_int, query_range
from ..common.validators import require_amount, require_int
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _date(data: dict, key: str):
        try:
            return parse_iso_date(str(data[key])[:10])
        except ValueError:
            raise ValidationError(f"{key} must be YYYY-MM-DD")

    @app.route("/api/payouts", methods=["POST"], endpoint="api_create_payout")
    @login_required
    def create_payout():
        data = json_body()
        required = ("employeeId", "payoutDate", "amountPaid", "payoutStartDate", "payoutEndDate")
        if any(data.get(k) in (None, "") for k in required):
            raise ValidationError("All fields required")

        payout = container.payout_service.record(
            current_actor(),
            employee_id=require_int(data["employeeId"], "employeeId"),
            payout_date=_date(data, "payoutDate"),
            amount_paid=require_amount(data["amountPaid"], "amountPaid"),
            period_start=_date(data, "payoutStartDate"),
            period_end=_date(data, "payoutEndDate"),
        )
        return jsonify(payout.to_dict()), 201

    @app.route("/api/payouts", methods=["GET"], endpoint="api_list_payouts")
    @login_required
    def list_payouts():
        start, end = query_range(required=False)
        payouts = container.payout_service.list_payouts(
            current_actor(),
            employee_id=query_int("employeeId"),
            start=start.date() if start else None,
            end=end.date() if end else None,
        )
        return jsonify([p.to_dict() for p in payouts])
