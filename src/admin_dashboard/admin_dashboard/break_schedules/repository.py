from __future__ import annotations

from typing import Protocol, Sequence

from .model import BreakSchedule, WeeklyBreakSummary


class BreakScheduleRepository(Protocol):
    def list_for_employee(self, *, employee_id: int, month: int, year: int) -> Sequence[BreakSchedule]:
        raise NotImplementedError

    def insert(
        self, *, employee_id: int, day: str, start_time: str, end_time: str, week: int, month: int, year: int
    ) -> int:
        """Unconditional insert. Returns the new id."""

        raise NotImplementedError

    def upsert(
        self, *, employee_id: int, day: str, start_time: str, end_time: str, week: int, month: int, year: int
    ) -> None:
        """Create the slot or replace its start/end time.

        Keyed by (employee_id, day, week, month, year).
        """

        raise NotImplementedError

    def weekly_summary(self, *, week: int, year: int) -> WeeklyBreakSummary:
        raise NotImplementedError
