from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import int_arg, json_body
from ..container import Container
from ..core.constants import DEFAULT_TOP_EMPLOYEES
from .model import Employee


def employee_json(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "firstName": e.first_name,
        "lastName": e.last_name,
        "email": e.email,
        "dni": e.dni,
        "entryTime": e.entry_time,
        "exitTime": e.exit_time,
        "hoursWorked": e.hours_worked,
        "xLite": e.x_lite,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/employees", methods=["GET", "POST"], endpoint="employees")
    def employees():
        if request.method == "POST":
            employee = container.employee_service.create(json_body())
            return jsonify(employee_json(employee)), 201

        return jsonify([employee_json(e) for e in container.employee_service.list_all()])

    @app.route("/employees/top", methods=["GET"], endpoint="employees_top")
    def employees_top():
        limit = int_arg("limit", DEFAULT_TOP_EMPLOYEES)
        return jsonify([employee_json(e) for e in container.employee_service.top_by_hours(limit)])
