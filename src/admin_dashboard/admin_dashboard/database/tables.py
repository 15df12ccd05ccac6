"""Table definitions for every record kind.

Relationships (break_schedules.employee_id, nps_trimestral.user_id) are by
convention only: no foreign keys are declared.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, String, Text, UniqueConstraint, text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class EmployeeRow(Base):
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(Text, nullable=False)
    last_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    dni = Column(Text, nullable=False)
    entry_time = Column(Text, nullable=False)
    exit_time = Column(Text, nullable=False)
    hours_worked = Column(Integer, nullable=False)
    x_lite = Column(Text, nullable=False)


class BreakScheduleRow(Base):
    __tablename__ = "break_schedules"
    __table_args__ = (
        UniqueConstraint("employee_id", "day", "week", "month", "year", name="uq_break_schedule_slot"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, nullable=False)
    day = Column(String(20), nullable=False)
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)  # HH:MM
    week = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    year = Column(Integer, nullable=False)


class UserRow(Base):
    """Survey subject. email/password_hash are only set for accounts with credentials."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    email = Column(String(255), nullable=True, unique=True)
    password_hash = Column(Text, nullable=True)
    responses = Column(Integer, nullable=False, default=0, server_default=text("0"))
    nps = Column(Integer, nullable=False, default=0, server_default=text("0"))
    csat = Column(Integer, nullable=False, default=0, server_default=text("0"))
    rd = Column(Integer, nullable=False, default=0, server_default=text("0"))


class NewsRow(Base):
    __tablename__ = "news"

    id = Column(Integer, primary_key=True, autoincrement=True)
    url = Column(Text, nullable=False)
    title = Column(Text, nullable=False)
    publish_date = Column(Text, nullable=False)
    estado = Column(Integer, nullable=False, default=1, server_default=text("1"))  # 1 vigente / 0 no vigente


class NpsTrimestralRow(Base):
    __tablename__ = "nps_trimestral"
    __table_args__ = (UniqueConstraint("user_id", "month", name="uq_nps_trimestral_user_month"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False)
    month = Column(String(7), nullable=False)  # YYYY-MM
    nps = Column(Integer, nullable=False)


TABLES = {
    "employees": EmployeeRow,
    "break_schedules": BreakScheduleRow,
    "users": UserRow,
    "news": NewsRow,
    "nps_trimestral": NpsTrimestralRow,
}


def describe_schema() -> dict[str, list[dict]]:
    """Column list per table: persisted name, required flag and default."""

    out: dict[str, list[dict]] = {}
    for name, model in TABLES.items():
        columns = []
        for col in model.__table__.columns:
            default = col.default.arg if col.default is not None else None
            columns.append(
                {
                    "name": col.name,
                    "required": not col.nullable and not col.primary_key,
                    "default": default,
                }
            )
        out[name] = columns
    return out
