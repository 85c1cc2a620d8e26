from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_actor, login_required, query_range
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/employee/<int:employee_id>/calc", methods=["GET"], endpoint="api_employee_calc")
    @login_required
    def employee_calc(employee_id: int):
        start, end = query_range()
        emp = container.access_policy.employee(current_actor(), employee_id)
        result = container.payroll_service.compute_total(emp.employee_id, start, end)
        return jsonify(result.to_dict())

    @app.route("/api/employees/summary/<int:employee_id>", methods=["GET"], endpoint="api_employee_summary")
    @login_required
    def employee_summary(employee_id: int):
        start, end = query_range()
        emp = container.access_policy.employee(current_actor(), employee_id)
        result = container.payroll_service.compute_breakdown(emp.employee_id, start, end)
        return jsonify({"success": True, "data": result.to_dict()})

    @app.route("/api/employees/all/calc", methods=["GET"], endpoint="api_all_calc")
    @login_required
    def all_calc():
        start, end = query_range()
        employees = container.access_policy.visible_employees(current_actor())
        results = container.payroll_service.compute_all_totals(start, end, employees=employees)
        return jsonify({"success": True, "data": [r.to_dict() for r in results]})
