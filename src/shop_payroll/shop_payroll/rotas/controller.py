from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import current_actor, json_body, login_required, query_int, query_range
from ..common.validators import require_int
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/rotas", methods=["POST"], endpoint="api_create_rota")
    @login_required
    def create_rota():
        data = json_body()
        if not data.get("shopId") or not data.get("employeeId") or not data.get("shiftDate"):
            raise ValidationError("shopId, employeeId and shiftDate required")

        try:
            shift_date = parse_iso_date(str(data["shiftDate"])[:10])
        except ValueError:
            raise ValidationError("shiftDate must be YYYY-MM-DD")

        rota = container.rota_service.assign(
            current_actor(),
            shop_id=require_int(data["shopId"], "shopId"),
            employee_id=require_int(data["employeeId"], "employeeId"),
            shift_date=shift_date,
            scheduled_start=data.get("scheduledStart"),
            scheduled_end=data.get("scheduledEnd"),
            note=data.get("note"),
        )
        return jsonify(rota.to_dict()), 201

    @app.route("/api/rotas", methods=["GET"], endpoint="api_list_rotas")
    @login_required
    def list_rotas():
        start, end = query_range(required=False)
        rotas = container.rota_service.list_rotas(
            current_actor(),
            shop_id=query_int("shopId"),
            employee_id=query_int("employeeId"),
            start=start.date() if start else None,
            end=end.date() if end else None,
        )
        return jsonify([r.to_dict() for r in rotas])

    @app.route("/api/rotas/<int:rota_id>", methods=["PUT"], endpoint="api_update_rota")
    @login_required
    def update_rota(rota_id: int):
        rota = container.rota_service.update(current_actor(), rota_id=rota_id, payload=json_body())
        return jsonify(rota.to_dict())

    @app.route("/api/rotas/<int:rota_id>", methods=["DELETE"], endpoint="api_delete_rota")
    @login_required
    def delete_rota(rota_id: int):
        container.rota_service.delete(current_actor(), rota_id=rota_id)
        return jsonify({"message": "Rota removed"})
