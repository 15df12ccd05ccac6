from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    employee_id: int
    first_name: str
    last_name: str
    email: str
    dni: str
    entry_time: str
    exit_time: str
    hours_worked: int
    x_lite: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
