from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.enums import NewsEstado


@dataclass(frozen=True)
class NewsItem:
    news_id: int
    url: str
    title: str
    publish_date: str
    estado: NewsEstado = NewsEstado.VIGENTE


@dataclass(frozen=True)
class NewsPage:
    items: Tuple[NewsItem, ...]
    page: int
    limit: int

    @property
    def has_more(self) -> bool:
        # A full page means the next one may still hold rows.
        return len(self.items) == self.limit
