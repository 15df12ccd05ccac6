from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..common.validators import require_hhmm, require_non_empty


class BreakSlot(BaseModel):
    """A break for one employee on one day of a given week."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    employee_id: int = Field(alias="employeeId", gt=0)
    day: str = Field(max_length=20)
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    week: int = Field(ge=1, le=53)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1970, le=9999)

    @field_validator("day")
    @classmethod
    def _day(cls, v: str) -> str:
        return require_non_empty(v, "day")

    @field_validator("start_time", "end_time")
    @classmethod
    def _time(cls, v: str, info) -> str:
        return require_hhmm(v, info.field_name)

    @model_validator(mode="after")
    def _ordered(self) -> "BreakSlot":
        if self.end_time <= self.start_time:
            raise ValueError("endTime must be after startTime")
        return self


class MonthQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    employee_id: int = Field(alias="employeeId", gt=0)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1970, le=9999)


class WeekQuery(BaseModel):
    week: int = Field(ge=1, le=53)
    year: int = Field(ge=1970, le=9999)
