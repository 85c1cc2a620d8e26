from __future__ import annotations

from datetime import timedelta

from flask import Flask, jsonify, session

from ..common.http import admin_required, current_actor, json_body, login_required
from ..common.validators import optional_str
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    @app.route("/api/auth/login", methods=["POST"], endpoint="api_login")
    def login():
        data = json_body()
        s_user = container.auth_service.authenticate(data.get("email", ""), data.get("password", ""))

        session.clear()
        session.permanent = bool(data.get("rememberMe", True))
        session["admin_id"] = s_user.admin_id
        session["role"] = s_user.role.value
        return jsonify(s_user.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="api_logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"})

    @app.route("/api/auth/me", methods=["GET"], endpoint="api_me")
    @login_required
    def me():
        return jsonify(container.auth_service.get_session_user(current_actor().admin_id).to_dict())

    @app.route("/api/admins", methods=["POST"], endpoint="api_create_admin")
    @admin_required
    def create_admin():
        data = json_body()
        try:
            role = Role(data.get("role") or Role.SHOP_ADMIN.value)
        except ValueError:
            raise ValidationError("role must be Admin or ShopAdmin")

        name = optional_str(data.get("name"), "name") or ""
        email = (optional_str(data.get("email"), "email") or "").lower()
        password = data.get("password") or ""

        admin_id = container.admin_account_service.create_account(
            current_role=current_actor().role,
            name=name,
            email=email,
            password=password,
            role=role,
        )
        return jsonify({"id": admin_id, "email": email, "role": role.value}), 201
