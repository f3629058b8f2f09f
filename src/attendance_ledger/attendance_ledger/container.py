from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .attendance.ledger import AttendanceLedger
from .attendance.service import AttendanceService
from .core.constants import EMPLOYEE_ID_PREFIX
from .core.enums import Role, SupervisorRole
from .employees.memory_repository import InMemoryEmployeeRepository
from .employees.service import EmployeeService
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    employees_repo: InMemoryEmployeeRepository
    ledger: AttendanceLedger

    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


DEMO_EMPLOYEES = (
    ("Alice", "Nguyen", Role.DEVELOPER, SupervisorRole.CTO),
    ("Bob", "Tran", Role.TESTER, SupervisorRole.MANAGER),
)


def build_container(*, settings: Optional[ModuleType] = None) -> Container:
    employees_repo = InMemoryEmployeeRepository(id_prefix=getattr(settings, "EMPLOYEE_ID_PREFIX", EMPLOYEE_ID_PREFIX))
    ledger = AttendanceLedger()

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(ledger, employees_repo)
    report_service = AttendanceReportService(ledger, employees_repo)

    if getattr(settings, "SEED_DEMO_EMPLOYEES", False):
        ensure_demo_employees(employee_service)

    return Container(
        employees_repo=employees_repo,
        ledger=ledger,
        employee_service=employee_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )


def ensure_demo_employees(employee_service: EmployeeService) -> None:
    if employee_service.list_employees():
        return
    for first_name, last_name, role, reports_to in DEMO_EMPLOYEES:
        employee_service.add_employee(first_name=first_name, last_name=last_name, role=role, reports_to=reports_to)
