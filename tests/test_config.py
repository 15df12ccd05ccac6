from __future__ import annotations

from config.config import db_config
from src.admin_dashboard.admin_dashboard.database.connection import DatabaseConnection, StoreSettings


def test_db_config_reads_primary_and_legacy_names(monkeypatch):
    for key in ("DATABASE_URL", "DATABASE_AUTH_TOKEN", "DB_MAX_RETRIES", "DB_RETRY_DELAY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TURSO_DATABASE_URL", "sqlite:///legacy.db")
    monkeypatch.setenv("DATABASE_AUTH_TOKEN", "  tok  ")

    cfg = db_config(default_url="sqlite:///fallback.db")

    assert cfg == {"url": "sqlite:///legacy.db", "auth_token": "tok", "max_retries": 3, "retry_delay": 5.0}


def test_mysql_url_uses_connector_driver_and_token_as_password():
    conn = DatabaseConnection(
        StoreSettings(url="mysql+mysqlconnector://dash@db.invalid:3306/dashboard", auth_token="tok"),
        sleep=lambda s: None,
    )

    engine = conn._create_engine()

    assert engine.dialect.name == "mysql"
    assert engine.dialect.driver == "mysqlconnector"
    assert engine.url.password == "tok"
    engine.dispose()
