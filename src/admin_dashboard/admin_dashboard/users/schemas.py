from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.validators import require_non_empty


class NewUser(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str
    email: Optional[str] = Field(default=None, max_length=255)
    password: Optional[str] = Field(default=None, min_length=6)
    responses: int = Field(default=0, ge=0)
    nps: int = Field(default=0, ge=0)
    csat: int = Field(default=0, ge=0)
    rd: int = Field(default=0, ge=0)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return require_non_empty(v, "name")

    @field_validator("email")
    @classmethod
    def _email(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v == "":
            return None
        if "@" not in v:
            raise ValueError("email is not valid")
        return v.lower()


class UserMetrics(BaseModel):
    responses: int = Field(ge=0)
    nps: int = Field(ge=0)
    csat: int = Field(ge=0)
    rd: int = Field(ge=0)
