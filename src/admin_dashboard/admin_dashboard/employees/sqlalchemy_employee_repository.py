from __future__ import annotations

from typing import Sequence

from sqlalchemy import insert, select

from ..database.connection import DatabaseConnection
from ..database.sqlalchemy_base import store_session
from ..database.tables import EmployeeRow
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: EmployeeRow) -> Employee:
    return Employee(
        employee_id=int(r.id),
        first_name=r.first_name,
        last_name=r.last_name,
        email=r.email,
        dni=r.dni,
        entry_time=r.entry_time,
        exit_time=r.exit_time,
        hours_worked=int(r.hours_worked),
        x_lite=r.x_lite,
    )


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with store_session(self._conn_factory, entity="employees", verb="fetch") as s:
            rows = s.scalars(select(EmployeeRow).order_by(EmployeeRow.id)).all()
            return [_to_employee(r) for r in rows]

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        dni: str,
        entry_time: str,
        exit_time: str,
        hours_worked: int,
        x_lite: str,
    ) -> int:
        with store_session(self._conn_factory, entity="employee", verb="add") as s:
            result = s.execute(
                insert(EmployeeRow).values(
                    first_name=first_name,
                    last_name=last_name,
                    email=email,
                    dni=dni,
                    entry_time=entry_time,
                    exit_time=exit_time,
                    hours_worked=int(hours_worked),
                    x_lite=x_lite,
                )
            )
            return int(result.inserted_primary_key[0])

    def top_by_hours(self, *, limit: int) -> Sequence[Employee]:
        with store_session(self._conn_factory, entity="top employees", verb="fetch") as s:
            rows = s.scalars(
                select(EmployeeRow).order_by(EmployeeRow.hours_worked.desc(), EmployeeRow.id).limit(int(limit))
            ).all()
            return [_to_employee(r) for r in rows]
