from __future__ import annotations

from typing import Optional

from ..core.constants import EMPLOYEE_ID_PREFIX, EMPLOYEE_ID_WIDTH
from .model import Employee


class InMemoryEmployeeRepository:
    """Insertion-ordered employee store.

    Ids come from a counter that only moves forward, so a deleted id is
    never handed out again.
    """

    def __init__(self, *, id_prefix: str = EMPLOYEE_ID_PREFIX, id_width: int = EMPLOYEE_ID_WIDTH):
        self._by_id: dict[str, Employee] = {}
        self._counter = 0
        self._prefix = id_prefix
        self._width = int(id_width)

    def exists(self, employee_id: str) -> bool:
        return employee_id in self._by_id

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def next_id(self) -> str:
        self._counter += 1
        return f"{self._prefix}{self._counter:0{self._width}d}"

    def add(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def update(self, employee: Employee) -> bool:
        if employee.employee_id not in self._by_id:
            return False
        self._by_id[employee.employee_id] = employee
        return True

    def delete(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None

    def list_all(self) -> list[Employee]:
        return list(self._by_id.values())
