from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import int_arg, json_body
from ..container import Container
from .model import BreakSchedule, WeeklyBreakSummary


def schedule_json(b: BreakSchedule) -> dict:
    return {
        "id": b.schedule_id,
        "employeeId": b.employee_id,
        "day": b.day,
        "startTime": b.start_time,
        "endTime": b.end_time,
        "week": b.week,
        "month": b.month,
        "year": b.year,
    }


def summary_json(summary: WeeklyBreakSummary) -> dict:
    return {
        "week": summary.week,
        "year": summary.year,
        "days": [{"day": d.day, "totalBreakTime": d.total_minutes} for d in summary.days],
        "totalBreakTime": summary.total_minutes,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/break-schedules", methods=["GET", "POST", "PUT"], endpoint="break_schedules")
    def break_schedules():
        svc = container.break_schedule_service

        if request.method == "POST":
            schedule_id = svc.add(json_body())
            return jsonify({"message": "Break schedule created", "id": schedule_id}), 201

        if request.method == "PUT":
            svc.save(json_body())
            return jsonify({"message": "Break schedule saved"})

        items = svc.list_for_employee(
            employee_id=int_arg("employeeId", required=True),
            month=int_arg("month", required=True),
            year=int_arg("year", required=True),
        )
        return jsonify([schedule_json(b) for b in items])

    @app.route("/break-schedules/summary", methods=["GET"], endpoint="break_schedules_summary")
    def break_schedules_summary():
        summary = container.break_schedule_service.weekly_summary(
            week=int_arg("week", required=True),
            year=int_arg("year", required=True),
        )
        return jsonify(summary_json(summary))
