from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import validate
from ..core.enums import NewsEstado
from ..core.exceptions import NotFoundError
from .model import NewsItem, NewsPage
from .repository import NewsRepository
from .schemas import EstadoChange, NewsFields, PageQuery

logger = logging.getLogger(__name__)


class NewsService:
    def __init__(self, news: NewsRepository):
        self._news = news

    def list_all(self) -> Sequence[NewsItem]:
        return self._news.list_all()

    def list_page(self, *, page: Optional[int] = None, limit: Optional[int] = None) -> NewsPage:
        raw = {k: v for k, v in {"page": page, "limit": limit}.items() if v is not None}
        q = validate(PageQuery, raw)
        return self._news.list_page(page=q.page, limit=q.limit)

    def create(self, payload: Mapping[str, Any]) -> NewsItem:
        data = validate(NewsFields, payload)
        news_id = self._news.create(
            url=data.url, title=data.title, publish_date=data.publish_date, estado=data.estado
        )
        logger.info("News item %s created", news_id)
        return NewsItem(
            news_id=news_id, url=data.url, title=data.title, publish_date=data.publish_date, estado=data.estado
        )

    def update(self, news_id: int, payload: Mapping[str, Any]) -> NewsItem:
        data = validate(NewsFields, payload)
        if not self._news.update(
            int(news_id), url=data.url, title=data.title, publish_date=data.publish_date, estado=data.estado
        ):
            raise NotFoundError("News item not found")
        return NewsItem(
            news_id=int(news_id),
            url=data.url,
            title=data.title,
            publish_date=data.publish_date,
            estado=data.estado,
        )

    def set_estado(self, news_id: int, payload: Mapping[str, Any]) -> NewsEstado:
        change = validate(EstadoChange, payload)
        if not self._news.set_estado(int(news_id), change.estado):
            raise NotFoundError("News item not found")
        return change.estado

    def toggle_estado(self, news_id: int) -> NewsItem:
        if not self._news.toggle_estado(int(news_id)):
            raise NotFoundError("News item not found")
        item = self._news.get_by_id(int(news_id))
        if not item:
            # deleted between the two calls
            raise NotFoundError("News item not found")
        logger.info("News item %s estado is now %s", news_id, int(item.estado))
        return item

    def delete(self, news_id: int) -> bool:
        """Remove a news item. Unknown ids are a no-op."""

        return self._news.delete(int(news_id))
