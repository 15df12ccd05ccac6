from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.validators import require_year_month


class NpsEntry(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    month: str
    nps: int = Field(ge=-100, le=100)

    @field_validator("month")
    @classmethod
    def _month(cls, v: str) -> str:
        return require_year_month(v, "month")
