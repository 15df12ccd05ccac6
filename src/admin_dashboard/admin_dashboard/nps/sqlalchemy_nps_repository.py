from __future__ import annotations

from typing import Sequence

from sqlalchemy import select

from ..database.connection import DatabaseConnection
from ..database.sqlalchemy_base import store_session, upsert_statement
from ..database.tables import NpsTrimestralRow
from .model import NpsTrimestralEntry
from .repository import NpsTrimestralRepository


class SQLAlchemyNpsTrimestralRepository(NpsTrimestralRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def latest_for_user(self, user_id: int, *, limit: int) -> Sequence[NpsTrimestralEntry]:
        with store_session(self._conn_factory, entity="quarterly NPS", verb="fetch") as s:
            rows = s.scalars(
                select(NpsTrimestralRow)
                .where(NpsTrimestralRow.user_id == int(user_id))
                .order_by(NpsTrimestralRow.month.desc())
                .limit(int(limit))
            ).all()
            return [
                NpsTrimestralEntry(entry_id=int(r.id), user_id=int(r.user_id), month=r.month, nps=int(r.nps))
                for r in rows
            ]

    def upsert(self, *, user_id: int, month: str, nps: int) -> None:
        values = {"user_id": int(user_id), "month": month, "nps": int(nps)}
        with store_session(self._conn_factory, entity="quarterly NPS", verb="update") as s:
            s.execute(upsert_statement(s, NpsTrimestralRow, values, keys=("user_id", "month"), update=("nps",)))
