from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import keep_if_blank, require_non_empty
from ..core.enums import Role, SupervisorRole
from ..core.exceptions import EmployeeNotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: maintain the employee directory."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def add_employee(self, *, first_name: str, last_name: str, role: Role, reports_to: SupervisorRole) -> Employee:
        first_name = require_non_empty(first_name, "First name")
        last_name = require_non_empty(last_name, "Last name")

        employee = Employee(
            employee_id=self._employees.next_id(),
            first_name=first_name,
            last_name=last_name,
            role=Role(role),
            reports_to=SupervisorRole(reports_to),
        )
        self._employees.add(employee)
        logger.info("Employee %s added (%s)", employee.employee_id, employee.full_name)
        return employee

    def update_employee(
        self,
        employee_id: str,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        role: Optional[Role] = None,
        reports_to: Optional[SupervisorRole] = None,
    ) -> Employee:
        """Update a profile; blank names keep their current value."""
        current = self.get_employee(employee_id)
        updated = replace(
            current,
            first_name=keep_if_blank(first_name, current.first_name),
            last_name=keep_if_blank(last_name, current.last_name),
            role=Role(role) if role else current.role,
            reports_to=SupervisorRole(reports_to) if reports_to else current.reports_to,
        )
        if not self._employees.update(updated):
            raise EmployeeNotFoundError(employee_id)
        logger.info("Employee %s updated", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete(employee_id):
            raise EmployeeNotFoundError(employee_id)
        logger.info("Employee %s deleted", employee_id)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def lookup(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(employee_id)

    def exists(self, employee_id: str) -> bool:
        return self._employees.exists(employee_id)

    def list_employees(self) -> list[Employee]:
        return list(self._employees.list_all())
