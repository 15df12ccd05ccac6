from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_NEWS_PAGE_SIZE, MAX_NEWS_PAGE_SIZE
from ..core.enums import NewsEstado


def _coerce_estado(v: Any) -> Any:
    if isinstance(v, bool):
        return NewsEstado(int(v))
    if isinstance(v, str):
        v = v.strip()
        return int(v) if v.lstrip("-").isdigit() else NewsEstado.from_legacy(v)
    return v


class NewsFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    url: str
    title: str
    publish_date: str = Field(alias="publishDate")
    estado: NewsEstado = NewsEstado.VIGENTE

    @field_validator("url", "title", "publish_date")
    @classmethod
    def _non_empty(cls, v: str, info) -> str:
        return require_non_empty(v, info.field_name)

    @field_validator("estado", mode="before")
    @classmethod
    def _estado(cls, v: Any) -> Any:
        return _coerce_estado(v)


class EstadoChange(BaseModel):
    estado: NewsEstado

    @field_validator("estado", mode="before")
    @classmethod
    def _estado(cls, v: Any) -> Any:
        return _coerce_estado(v)


class PageQuery(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_NEWS_PAGE_SIZE, ge=1, le=MAX_NEWS_PAGE_SIZE)
