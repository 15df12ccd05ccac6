from __future__ import annotations

import pytest

from src.admin_dashboard.admin_dashboard.container import build_container
from src.admin_dashboard.admin_dashboard.main import create_app

MEMORY_DB = {"url": "sqlite:///:memory:", "auth_token": "test-token", "max_retries": 0, "retry_delay": 0}


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def container(sleeps):
    c = build_container(
        db_config=dict(MEMORY_DB),
        oauth_config={"google_client_id": "client-id", "google_client_secret": "client-secret"},
        sleep=sleeps.append,
    )
    c.conn.initialize()
    yield c
    c.conn.dispose()


@pytest.fixture
def app(container):
    return create_app("config.testing", container=container)


@pytest.fixture
def client(app):
    return app.test_client()
