from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from ..common.validators import validate
from .model import BreakSchedule, WeeklyBreakSummary
from .repository import BreakScheduleRepository
from .schemas import BreakSlot, MonthQuery, WeekQuery

logger = logging.getLogger(__name__)


class BreakScheduleService:
    def __init__(self, schedules: BreakScheduleRepository):
        self._schedules = schedules

    def list_for_employee(self, *, employee_id: Any, month: Any, year: Any) -> Sequence[BreakSchedule]:
        q = validate(MonthQuery, {"employeeId": employee_id, "month": month, "year": year})
        return self._schedules.list_for_employee(employee_id=q.employee_id, month=q.month, year=q.year)

    def add(self, payload: Mapping[str, Any]) -> int:
        slot = validate(BreakSlot, payload)
        return self._schedules.insert(**slot.model_dump())

    def save(self, payload: Mapping[str, Any]) -> BreakSlot:
        """Set the break for a slot, creating it when missing."""

        slot = validate(BreakSlot, payload)
        logger.debug("Saving break schedule %s", slot.model_dump())
        self._schedules.upsert(**slot.model_dump())
        return slot

    def weekly_summary(self, *, week: Any, year: Any) -> WeeklyBreakSummary:
        q = validate(WeekQuery, {"week": week, "year": year})
        return self._schedules.weekly_summary(week=q.week, year=q.year)
