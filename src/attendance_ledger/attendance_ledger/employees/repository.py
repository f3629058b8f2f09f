from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Directory interface for employees.

    Note (DIP): the attendance and report services only rely on `exists`
    and `get_by_id`; the rest is used by EmployeeService.
    """

    def exists(self, employee_id: str) -> bool:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def next_id(self) -> str:
        raise NotImplementedError

    def add(self, employee: Employee) -> None:
        raise NotImplementedError

    def update(self, employee: Employee) -> bool:
        raise NotImplementedError

    def delete(self, employee_id: str) -> bool:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError
