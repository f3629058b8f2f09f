from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role, SupervisorRole


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee profile held by the directory.

    Note: plain data object, the directory owns storage.
    """

    employee_id: str
    first_name: str
    last_name: str
    role: Role
    reports_to: SupervisorRole

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return (
            f"ID: {self.employee_id} | Name: {self.full_name} | "
            f"Role: {self.role} | Reports To: {self.reports_to}"
        )
