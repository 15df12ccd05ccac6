from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..database.connection import masked_url


def _shown(value: str) -> str:
    return value or "NOT CONFIGURED"


def _hidden(value: str) -> str:
    return "CONFIGURED (hidden)" if value else "NOT CONFIGURED"


def register(app: Flask, container: Container) -> None:
    @app.route("/env-check", methods=["GET"], endpoint="env_check")
    def env_check():
        settings = container.conn.settings
        oauth = container.oauth_config
        return jsonify(
            {
                "DATABASE_URL": masked_url(settings.url),
                "DATABASE_AUTH_TOKEN": _hidden(settings.auth_token),
                "GOOGLE_CLIENT_ID": _shown(oauth.get("google_client_id", "")),
                "GOOGLE_CLIENT_SECRET": _hidden(oauth.get("google_client_secret", "")),
                "databaseConnected": container.conn.engine is not None,
            }
        )
