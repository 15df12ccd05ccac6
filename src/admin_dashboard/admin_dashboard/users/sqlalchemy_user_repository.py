from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import func, insert, select, update

from ..database.connection import DatabaseConnection
from ..database.sqlalchemy_base import store_session
from ..database.tables import UserRow
from .model import SurveyUser, UserStatistics
from .repository import UserRepository


def _to_user(r: UserRow) -> SurveyUser:
    return SurveyUser(
        user_id=int(r.id),
        name=r.name,
        responses=int(r.responses or 0),
        nps=int(r.nps or 0),
        csat=int(r.csat or 0),
        rd=int(r.rd or 0),
        email=r.email,
        password_hash=r.password_hash,
    )


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[SurveyUser]:
        with store_session(self._conn_factory, entity="users", verb="fetch") as s:
            rows = s.scalars(select(UserRow).order_by(UserRow.id)).all()
            return [_to_user(r) for r in rows]

    def get_by_id(self, user_id: int) -> Optional[SurveyUser]:
        with store_session(self._conn_factory, entity="user", verb="fetch") as s:
            r = s.get(UserRow, int(user_id))
            return _to_user(r) if r else None

    def get_by_email(self, email: str) -> Optional[SurveyUser]:
        with store_session(self._conn_factory, entity="user by email", verb="fetch") as s:
            r = s.scalars(select(UserRow).where(UserRow.email == email).limit(1)).first()
            return _to_user(r) if r else None

    def create(
        self,
        *,
        name: str,
        responses: int = 0,
        nps: int = 0,
        csat: int = 0,
        rd: int = 0,
        email: Optional[str] = None,
        password_hash: Optional[str] = None,
    ) -> int:
        with store_session(self._conn_factory, entity="user", verb="create") as s:
            result = s.execute(
                insert(UserRow).values(
                    name=name,
                    responses=int(responses),
                    nps=int(nps),
                    csat=int(csat),
                    rd=int(rd),
                    email=email,
                    password_hash=password_hash,
                )
            )
            return int(result.inserted_primary_key[0])

    def update_metrics(self, user_id: int, *, responses: int, nps: int, csat: int, rd: int) -> bool:
        with store_session(self._conn_factory, entity="user", verb="update") as s:
            result = s.execute(
                update(UserRow)
                .where(UserRow.id == int(user_id))
                .values(responses=int(responses), nps=int(nps), csat=int(csat), rd=int(rd))
            )
            return result.rowcount > 0

    def statistics(self) -> UserStatistics:
        with store_session(self._conn_factory, entity="user statistics", verb="fetch") as s:
            r = s.execute(
                select(
                    func.coalesce(func.count(UserRow.id), 0).label("total_users"),
                    func.coalesce(func.avg(UserRow.nps), 0).label("average_nps"),
                    func.coalesce(func.avg(UserRow.csat), 0).label("average_csat"),
                    func.coalesce(func.avg(UserRow.rd), 0).label("average_rd"),
                )
            ).one()
            return UserStatistics(
                total_users=int(r.total_users or 0),
                average_nps=float(r.average_nps or 0),
                average_csat=float(r.average_csat or 0),
                average_rd=float(r.average_rd or 0),
            )
