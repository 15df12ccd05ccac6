from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container
from .model import SurveyUser, UserStatistics


def user_json(u: SurveyUser) -> dict:
    return {
        "id": u.user_id,
        "name": u.name,
        "email": u.email,
        "responses": u.responses,
        "nps": u.nps,
        "csat": u.csat,
        "rd": u.rd,
    }


def statistics_json(stats: UserStatistics) -> dict:
    return {
        "totalUsers": stats.total_users,
        "averageNPS": stats.average_nps,
        "averageCSAT": stats.average_csat,
        "averageRD": stats.average_rd,
    }


def register(app: Flask, container: Container) -> None:
    # /nps-individual is the path the dashboard pages use for the same rows.
    @app.route("/users", methods=["GET", "POST"], endpoint="users")
    @app.route("/nps-individual", methods=["GET", "POST"], endpoint="nps_individual")
    def users():
        if request.method == "POST":
            user = container.user_service.create(json_body())
            return jsonify(user_json(user)), 201

        email = request.args.get("email")
        if email is not None:
            found = container.user_service.find_by_email(email)
            return jsonify([user_json(found)] if found else [])

        return jsonify([user_json(u) for u in container.user_service.list_all()])

    @app.route("/users/stats", methods=["GET"], endpoint="users_stats")
    def users_stats():
        return jsonify(statistics_json(container.user_service.statistics()))

    @app.route("/users/<int:user_id>", methods=["GET", "PUT"], endpoint="user_detail")
    @app.route("/nps-individual/<int:user_id>", methods=["GET", "PUT"], endpoint="nps_individual_detail")
    def user_detail(user_id: int):
        if request.method == "PUT":
            container.user_service.update_metrics(user_id, json_body())
            return jsonify({"message": "User updated successfully"})

        return jsonify(user_json(container.user_service.get(user_id)))
