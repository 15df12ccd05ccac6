from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import NewsEstado
from .model import NewsItem, NewsPage


class NewsRepository(Protocol):
    def list_all(self) -> Sequence[NewsItem]:
        raise NotImplementedError

    def list_page(self, *, page: int, limit: int) -> NewsPage:
        raise NotImplementedError

    def get_by_id(self, news_id: int) -> Optional[NewsItem]:
        raise NotImplementedError

    def create(self, *, url: str, title: str, publish_date: str, estado: NewsEstado) -> int:
        raise NotImplementedError

    def update(self, news_id: int, *, url: str, title: str, publish_date: str, estado: NewsEstado) -> bool:
        raise NotImplementedError

    def set_estado(self, news_id: int, estado: NewsEstado) -> bool:
        raise NotImplementedError

    def toggle_estado(self, news_id: int) -> bool:
        """Flip 1 <-> 0 in a single statement. False when the id is unknown."""

        raise NotImplementedError

    def delete(self, news_id: int) -> bool:
        raise NotImplementedError
