from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import admin_required, current_actor, json_body, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shops", methods=["GET"], endpoint="api_list_shops")
    @login_required
    def list_shops():
        shops = container.shop_service.list_visible(current_actor())
        return jsonify([s.to_dict() for s in shops])

    @app.route("/api/shops", methods=["POST"], endpoint="api_create_shop")
    @admin_required
    def create_shop():
        shop = container.shop_service.create(current_actor(), json_body())
        return jsonify(shop.to_dict()), 201
