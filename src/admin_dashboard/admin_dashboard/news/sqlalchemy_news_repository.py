from __future__ import annotations

import logging
from typing import Optional, Sequence

from sqlalchemy import delete, insert, select, update

from ..core.enums import NewsEstado
from ..database.connection import DatabaseConnection
from ..database.sqlalchemy_base import store_session
from ..database.tables import NewsRow
from .model import NewsItem, NewsPage
from .repository import NewsRepository

logger = logging.getLogger(__name__)


def _to_news(r: NewsRow) -> NewsItem:
    return NewsItem(
        news_id=int(r.id),
        url=r.url,
        title=r.title,
        publish_date=r.publish_date,
        estado=NewsEstado(int(r.estado)),
    )


class SQLAlchemyNewsRepository(NewsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[NewsItem]:
        with store_session(self._conn_factory, entity="news items", verb="fetch") as s:
            rows = s.scalars(select(NewsRow).order_by(NewsRow.id)).all()
            return [_to_news(r) for r in rows]

    def list_page(self, *, page: int, limit: int) -> NewsPage:
        offset = (int(page) - 1) * int(limit)
        logger.debug("Fetching news page=%s limit=%s offset=%s", page, limit, offset)
        with store_session(self._conn_factory, entity="news items", verb="fetch") as s:
            rows = s.scalars(select(NewsRow).order_by(NewsRow.id).limit(int(limit)).offset(offset)).all()
            return NewsPage(items=tuple(_to_news(r) for r in rows), page=int(page), limit=int(limit))

    def get_by_id(self, news_id: int) -> Optional[NewsItem]:
        with store_session(self._conn_factory, entity="news item", verb="fetch") as s:
            r = s.get(NewsRow, int(news_id))
            return _to_news(r) if r else None

    def create(self, *, url: str, title: str, publish_date: str, estado: NewsEstado) -> int:
        with store_session(self._conn_factory, entity="news item", verb="add") as s:
            result = s.execute(
                insert(NewsRow).values(url=url, title=title, publish_date=publish_date, estado=int(estado))
            )
            return int(result.inserted_primary_key[0])

    def update(self, news_id: int, *, url: str, title: str, publish_date: str, estado: NewsEstado) -> bool:
        with store_session(self._conn_factory, entity="news item", verb="update") as s:
            result = s.execute(
                update(NewsRow)
                .where(NewsRow.id == int(news_id))
                .values(url=url, title=title, publish_date=publish_date, estado=int(estado))
            )
            return result.rowcount > 0

    def set_estado(self, news_id: int, estado: NewsEstado) -> bool:
        with store_session(self._conn_factory, entity="news item status", verb="update") as s:
            result = s.execute(update(NewsRow).where(NewsRow.id == int(news_id)).values(estado=int(estado)))
            return result.rowcount > 0

    def toggle_estado(self, news_id: int) -> bool:
        with store_session(self._conn_factory, entity="news item status", verb="toggle") as s:
            result = s.execute(
                update(NewsRow).where(NewsRow.id == int(news_id)).values(estado=1 - NewsRow.estado)
            )
            return result.rowcount > 0

    def delete(self, news_id: int) -> bool:
        with store_session(self._conn_factory, entity="news item", verb="delete") as s:
            result = s.execute(delete(NewsRow).where(NewsRow.id == int(news_id)))
            return result.rowcount > 0
