"""Interactive text menu.

Thin layer: it reads operator input, turns it into validated values and
calls the services. Domain errors are reported as messages and the loop
keeps going; end of input leaves the loop.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Sequence, TypeVar

from ..common.datetime_utils import format_datetime, now_local, parse_datetime_input, parse_iso_date
from ..container import Container
from ..core.enums import Role, SupervisorRole
from ..core.exceptions import DomainError, EmployeeNotFoundError, ValidationError
from ..reports.service import AttendanceReportRow

logger = logging.getLogger(__name__)

T = TypeVar("T")

MENU = """--------------------------
1. Add Employee
2. View All Employees
3. Update Employee
4. Delete Employee
5. Check-In
6. Check-Out
7. Show Working Hours
8. Show Currently Checked-In
9. Show Records Between Dates
10. Exit
--------------------------"""

EXIT_CHOICE = "10"


class ConsoleApp:
    def __init__(
        self,
        container: Container,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clock: Callable[[], datetime] = now_local,
    ):
        self._c = container
        self._input = input_fn
        self._output = output_fn
        self._clock = clock
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_employee,
            "2": self.view_employees,
            "3": self.update_employee,
            "4": self.delete_employee,
            "5": self.check_in,
            "6": self.check_out,
            "7": self.show_working_hours,
            "8": self.show_checked_in,
            "9": self.show_records_between_dates,
        }

    def run(self) -> None:
        self._say("=== Welcome to Employee Attendance System ===")
        while True:
            self._say(MENU)
            try:
                choice = self._ask("Choose (1-10): ")
            except EOFError:
                break

            if choice == EXIT_CHOICE:
                break

            action = self._actions.get(choice)
            if not action:
                self._say("Invalid choice.")
                continue

            try:
                action()
            except EOFError:
                break
            except DomainError as exc:
                self._say(str(exc))

        self._say("Exiting...")

    # --- employees ---

    def add_employee(self) -> None:
        self._say("=== Add New Employee ===")
        first_name = self._ask("Enter First Name: ")
        last_name = self._ask("Enter Last Name: ")
        role = self._choose("Select Role:", list(Role))
        reports_to = self._choose("Select Supervisor:", list(SupervisorRole))

        employee = self._c.employee_service.add_employee(
            first_name=first_name,
            last_name=last_name,
            role=role,
            reports_to=reports_to,
        )
        self._say(f"Employee added! ID: {employee.employee_id}")

    def view_employees(self) -> None:
        self._say("=== Employees ===")
        employees = self._c.employee_service.list_employees()
        if not employees:
            self._say("No records.")
        for e in employees:
            self._say(str(e))

    def update_employee(self) -> None:
        self._say("=== Update Employee ===")
        employee = self._c.employee_service.get_employee(self._ask("Enter Employee ID to update: "))

        first_name = self._ask(f"First Name ({employee.first_name}): ")
        last_name = self._ask(f"Last Name ({employee.last_name}): ")
        role = self._choose("Select Role:", list(Role))
        reports_to = self._choose("Select Supervisor:", list(SupervisorRole))

        self._c.employee_service.update_employee(
            employee.employee_id,
            first_name=first_name,
            last_name=last_name,
            role=role,
            reports_to=reports_to,
        )
        self._say("Employee updated.")

    def delete_employee(self) -> None:
        self._say("=== Delete Employee ===")
        self._c.employee_service.delete_employee(self._ask("Enter ID: "))
        self._say("Employee deleted.")

    # --- attendance ---

    def check_in(self) -> None:
        self._say("=== Check-In ===")
        employee_id = self._ask("Enter Employee ID: ")
        employee = self._c.employee_service.lookup(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        if self._c.attendance_service.active_session(employee_id):
            self._say("Already checked in!")
            return

        at = self._ask_timestamp("Check-In Time")
        record = self._c.attendance_service.check_in(employee_id, at=at)
        self._say(f"{employee.full_name} checked in at {format_datetime(record.check_in)}")

    def check_out(self) -> None:
        self._say("=== Check-Out ===")
        employee_id = self._ask("Enter Employee ID: ")
        if not self._c.attendance_service.active_session(employee_id):
            self._say("No active check-in.")
            return

        at = self._ask_timestamp("Check-Out Time")
        record = self._c.attendance_service.check_out(employee_id, at=at)
        employee = self._c.employee_service.lookup(employee_id)
        name = employee.full_name if employee else employee_id
        self._say(f"{name} checked out at {format_datetime(record.check_out)}")

    # --- reports ---

    def show_working_hours(self) -> None:
        self._say("=== Working Hours Report ===")
        rows = self._c.report_service.working_hours()
        self._print_rows(rows, empty="No records.")
        if rows:
            self._say("--- Totals ---")
            for t in self._c.report_service.summary(rows):
                self._say(f"{t.full_name} | {t.worked}")

    def show_checked_in(self) -> None:
        self._say("=== Checked-In Now ===")
        self._print_rows(self._c.report_service.currently_checked_in(), empty="No one is checked in.")

    def show_records_between_dates(self) -> None:
        self._say("=== Records Between Dates ===")
        start = self._ask_date("From Date")
        end = self._ask_date("To Date")
        self._print_rows(self._c.report_service.between_dates(start, end), empty="No records found.")

    # --- helpers ---

    def _say(self, text: str) -> None:
        self._output(text)

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_timestamp(self, label: str) -> datetime:
        parsed = parse_datetime_input(self._ask(f"{label} (yyyy-MM-dd HH:mm or Enter for now): "), now=self._clock())
        if parsed.error:
            logger.debug("Timestamp input rejected: %s", parsed.error)
            self._say("Invalid format. Using current time.")
        return parsed.value

    def _ask_date(self, label: str) -> date:
        while True:
            try:
                return parse_iso_date(self._ask(f"{label} (yyyy-MM-dd): "))
            except ValidationError:
                self._say("Invalid date. Try again.")

    def _choose(self, title: str, options: Sequence[T]) -> T:
        self._say(title)
        for index, option in enumerate(options, start=1):
            self._say(f"{index}. {option}")
        while True:
            raw = self._ask("Enter choice: ")
            if raw.isdigit() and 1 <= int(raw) <= len(options):
                return options[int(raw) - 1]
            self._say("Invalid choice.")

    def _print_rows(self, rows: Sequence[AttendanceReportRow], *, empty: str) -> None:
        if not rows:
            self._say(empty)
        for r in rows:
            self._say(r.render())
