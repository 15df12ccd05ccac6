from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def create(
        self,
        *,
        first_name: str,
        last_name: str,
        email: str,
        dni: str,
        entry_time: str,
        exit_time: str,
        hours_worked: int,
        x_lite: str,
    ) -> int:
        """Insert an employee. Returns the store-assigned id."""

        raise NotImplementedError

    def top_by_hours(self, *, limit: int) -> Sequence[Employee]:
        raise NotImplementedError
