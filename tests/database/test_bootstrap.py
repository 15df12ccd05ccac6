from __future__ import annotations

import pytest
from sqlalchemy import Text, UniqueConstraint
from sqlalchemy.dialects import mysql
from sqlalchemy.exc import OperationalError
from sqlalchemy.schema import CreateTable

from src.admin_dashboard.admin_dashboard.core.exceptions import SchemaError
from src.admin_dashboard.admin_dashboard.database.bootstrap import ensure_tables_exist, list_tables
from src.admin_dashboard.admin_dashboard.database.seed import seed_demo_data
from src.admin_dashboard.admin_dashboard.database.tables import (
    TABLES,
    Base,
    BreakScheduleRow,
    NpsTrimestralRow,
    UserRow,
    describe_schema,
)


def test_ensure_tables_exist_is_idempotent(container):
    engine = container.conn.ensure_connection()

    ensure_tables_exist(engine)
    ensure_tables_exist(engine)

    assert len(list_tables(engine)) == 5


def test_table_creation_failure_raises_schema_error(container, monkeypatch):
    engine = container.conn.ensure_connection()

    def boom(*args, **kwargs):
        raise OperationalError("CREATE TABLE", {}, Exception("disk I/O error"))

    monkeypatch.setattr(type(Base.metadata), "create_all", boom)

    with pytest.raises(SchemaError):
        ensure_tables_exist(engine)


def test_describe_schema_lists_columns_and_defaults():
    schema = describe_schema()

    assert set(schema) == {"employees", "break_schedules", "users", "news", "nps_trimestral"}

    users = {c["name"]: c for c in schema["users"]}
    assert users["nps"]["default"] == 0
    assert users["nps"]["required"] is True
    assert users["email"]["required"] is False

    news = {c["name"]: c for c in schema["news"]}
    assert news["estado"]["default"] == 1
    assert news["publish_date"]["required"] is True


def test_demo_seed_runs_once(container):
    seed_demo_data(container)
    seed_demo_data(container)

    assert len(container.employee_service.list_all()) == 2
    assert len(container.user_service.list_all()) == 1
    assert len(container.news_service.list_all()) == 1
    assert container.nps_trimestral_service.history(1)[0].nps == 62


@pytest.mark.parametrize("model", list(TABLES.values()), ids=list(TABLES))
def test_unique_keys_use_bounded_columns(model):
    # MySQL refuses UNIQUE keys over TEXT columns without a prefix length.
    keyed = set()
    for constraint in model.__table__.constraints:
        if isinstance(constraint, UniqueConstraint):
            keyed.update(constraint.columns)
    keyed.update(c for c in model.__table__.columns if c.unique)

    for column in keyed:
        assert not isinstance(column.type, Text), column.name


def test_mysql_ddl_declares_varchar_slot_keys():
    ddl = str(CreateTable(BreakScheduleRow.__table__).compile(dialect=mysql.dialect())).replace("`", "")

    assert "day VARCHAR(20) NOT NULL" in ddl
    assert "UNIQUE (employee_id, day, week, month, year)" in ddl

    ddl = str(CreateTable(NpsTrimestralRow.__table__).compile(dialect=mysql.dialect())).replace("`", "")
    assert "month VARCHAR(7) NOT NULL" in ddl

    ddl = str(CreateTable(UserRow.__table__).compile(dialect=mysql.dialect())).replace("`", "")
    assert "email VARCHAR(255)" in ddl
