from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..container import Container
from .model import NpsTrimestralEntry


def entry_json(e: NpsTrimestralEntry) -> dict:
    return {"id": e.entry_id, "userId": e.user_id, "month": e.month, "nps": e.nps}


def register(app: Flask, container: Container) -> None:
    @app.route("/nps-trimestral/<int:user_id>", methods=["GET", "POST"], endpoint="nps_trimestral")
    def nps_trimestral(user_id: int):
        svc = container.nps_trimestral_service

        if request.method == "POST":
            entry = svc.record(user_id, json_body())
            return jsonify(
                {
                    "message": "NPS trimestral updated successfully",
                    "userId": user_id,
                    "month": entry.month,
                    "nps": entry.nps,
                }
            )

        return jsonify([entry_json(e) for e in svc.history(user_id)])
