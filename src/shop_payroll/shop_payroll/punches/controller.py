from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_datetime
from ..common.http import current_actor, json_body, login_required, query_int, query_range
from ..common.validators import require_int
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/punchings/in", methods=["POST"], endpoint="api_punch_in")
    @login_required
    def punch_in():
        data = json_body()
        if not data.get("shopId") or not data.get("employeeId") or not data.get("punchInDatetime"):
            raise ValidationError("shopId, employeeId and punchInDatetime required")

        punch = container.punch_service.punch_in(
            current_actor(),
            shop_id=require_int(data["shopId"], "shopId"),
            employee_id=require_int(data["employeeId"], "employeeId"),
            punch_in=parse_datetime(data["punchInDatetime"], "punchInDatetime"),
        )
        return jsonify(punch.to_dict()), 201

    @app.route("/api/punchings/out", methods=["POST"], endpoint="api_punch_out")
    @login_required
    def punch_out():
        data = json_body()
        if not data.get("punchingId") or not data.get("punchOutDatetime"):
            raise ValidationError("punchingId and punchOutDatetime required")

        punch = container.punch_service.punch_out(
            current_actor(),
            punch_id=require_int(data["punchingId"], "punchingId"),
            punch_out=parse_datetime(data["punchOutDatetime"], "punchOutDatetime"),
        )
        return jsonify(punch.to_dict())

    @app.route("/api/punchings", methods=["GET"], endpoint="api_list_punches")
    @login_required
    def list_punches():
        start, end = query_range(required=False)
        punches = container.punch_service.list_punches(
            current_actor(),
            shop_id=query_int("shopId"),
            employee_id=query_int("employeeId"),
            start=start,
            end=end,
        )
        return jsonify([p.to_dict() for p in punches])
