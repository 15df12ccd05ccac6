from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, insert, select

from ..database.connection import DatabaseConnection
from ..database.sqlalchemy_base import minutes_between, store_session, upsert_statement
from ..database.tables import BreakScheduleRow
from .model import BreakSchedule, DayBreakTotal, WeeklyBreakSummary
from .repository import BreakScheduleRepository

_SLOT_KEY = ("employee_id", "day", "week", "month", "year")


def _to_schedule(r: BreakScheduleRow) -> BreakSchedule:
    return BreakSchedule(
        schedule_id=int(r.id),
        employee_id=int(r.employee_id),
        day=r.day,
        start_time=r.start_time,
        end_time=r.end_time,
        week=int(r.week),
        month=int(r.month),
        year=int(r.year),
    )


class SQLAlchemyBreakScheduleRepository(BreakScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, *, employee_id: int, month: int, year: int) -> Sequence[BreakSchedule]:
        with store_session(self._conn_factory, entity="break schedules", verb="fetch") as s:
            rows = s.scalars(
                select(BreakScheduleRow)
                .where(
                    BreakScheduleRow.employee_id == int(employee_id),
                    BreakScheduleRow.month == int(month),
                    BreakScheduleRow.year == int(year),
                )
                .order_by(BreakScheduleRow.week, BreakScheduleRow.id)
            ).all()
            return [_to_schedule(r) for r in rows]

    def insert(
        self, *, employee_id: int, day: str, start_time: str, end_time: str, week: int, month: int, year: int
    ) -> int:
        with store_session(self._conn_factory, entity="break schedule", verb="add") as s:
            result = s.execute(
                insert(BreakScheduleRow).values(
                    employee_id=int(employee_id),
                    day=day,
                    start_time=start_time,
                    end_time=end_time,
                    week=int(week),
                    month=int(month),
                    year=int(year),
                )
            )
            return int(result.inserted_primary_key[0])

    def upsert(
        self, *, employee_id: int, day: str, start_time: str, end_time: str, week: int, month: int, year: int
    ) -> None:
        values = {
            "employee_id": int(employee_id),
            "day": day,
            "start_time": start_time,
            "end_time": end_time,
            "week": int(week),
            "month": int(month),
            "year": int(year),
        }
        with store_session(self._conn_factory, entity="break schedule", verb="update") as s:
            s.execute(
                upsert_statement(s, BreakScheduleRow, values, keys=_SLOT_KEY, update=("start_time", "end_time"))
            )

    def weekly_summary(self, *, week: int, year: int) -> WeeklyBreakSummary:
        with store_session(self._conn_factory, entity="weekly break summary", verb="fetch") as s:
            minutes = minutes_between(s, BreakScheduleRow.start_time, BreakScheduleRow.end_time)
            rows = s.execute(
                select(BreakScheduleRow.day, func.coalesce(func.sum(minutes), 0).label("total"))
                .where(BreakScheduleRow.week == int(week), BreakScheduleRow.year == int(year))
                .group_by(BreakScheduleRow.day)
                .order_by(BreakScheduleRow.day)
            ).all()
            days = tuple(DayBreakTotal(day=r.day, total_minutes=int(round(float(r.total or 0)))) for r in rows)
            return WeeklyBreakSummary(week=int(week), year=int(year), days=days)
