from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BreakSchedule:
    schedule_id: int
    employee_id: int
    day: str
    start_time: str
    end_time: str
    week: int
    month: int
    year: int


@dataclass(frozen=True)
class DayBreakTotal:
    day: str
    total_minutes: int


@dataclass(frozen=True)
class WeeklyBreakSummary:
    week: int
    year: int
    days: Tuple[DayBreakTotal, ...]

    @property
    def total_minutes(self) -> int:
        return sum(d.total_minutes for d in self.days)
