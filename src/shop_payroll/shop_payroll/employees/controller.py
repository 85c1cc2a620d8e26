from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_actor, json_body, login_required, query_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_list_employees")
    @login_required
    def list_employees():
        emps = container.employee_service.list_visible(current_actor(), shop_id=query_int("shopId"))
        return jsonify([e.to_dict() for e in emps])

    @app.route("/api/employees", methods=["POST"], endpoint="api_create_employee")
    @login_required
    def create_employee():
        emp = container.employee_service.create(current_actor(), json_body())
        return jsonify(emp.to_dict()), 201

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="api_get_employee")
    @login_required
    def get_employee(employee_id: int):
        return jsonify(container.employee_service.get(current_actor(), employee_id).to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["PUT"], endpoint="api_update_employee")
    @login_required
    def update_employee(employee_id: int):
        emp = container.employee_service.update(current_actor(), employee_id, json_body())
        return jsonify(emp.to_dict())

    @app.route("/api/employees/<int:employee_id>", methods=["DELETE"], endpoint="api_delete_employee")
    @login_required
    def delete_employee(employee_id: int):
        container.employee_service.delete(current_actor(), employee_id)
        return jsonify({"message": "Employee removed"})
