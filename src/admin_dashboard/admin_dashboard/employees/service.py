from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.validators import validate
from ..core.constants import DEFAULT_TOP_EMPLOYEES
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository
from .schemas import NewEmployee


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def create(self, payload: Mapping[str, Any]) -> Employee:
        data = validate(NewEmployee, payload)
        fields = data.model_dump()
        employee_id = self._employees.create(**fields)
        return Employee(employee_id=employee_id, **fields)

    def top_by_hours(self, limit: int = DEFAULT_TOP_EMPLOYEES) -> Sequence[Employee]:
        if int(limit) <= 0:
            raise ValidationError("limit must be positive")
        return self._employees.top_by_hours(limit=int(limit))
