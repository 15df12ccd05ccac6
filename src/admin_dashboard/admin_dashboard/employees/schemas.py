from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.validators import require_hhmm, require_non_empty


class NewEmployee(BaseModel):
    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    dni: str
    entry_time: str = Field(alias="entryTime")
    exit_time: str = Field(alias="exitTime")
    hours_worked: int = Field(alias="hoursWorked", ge=0)
    x_lite: str = Field(alias="xLite")

    @field_validator("first_name", "last_name", "dni", "x_lite")
    @classmethod
    def _non_empty(cls, v: str, info) -> str:
        return require_non_empty(v, info.field_name)

    @field_validator("email")
    @classmethod
    def _email(cls, v: str) -> str:
        v = require_non_empty(v, "email")
        if "@" not in v:
            raise ValueError("email is not valid")
        return v

    @field_validator("entry_time", "exit_time")
    @classmethod
    def _time(cls, v: str, info) -> str:
        return require_hhmm(v, info.field_name)
