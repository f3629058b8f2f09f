from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..attendance.ledger import AttendanceLedger
from ..attendance.model import AttendanceRecord, WorkedDuration
from ..common.datetime_utils import format_datetime
from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..employees.repository import EmployeeRepository


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for display: a record joined with the employee's name."""

    employee_id: str
    full_name: str
    check_in: datetime
    check_out: Optional[datetime]
    worked: Optional[WorkedDuration]

    def render(self) -> str:
        if self.worked is None:
            return f"{self.full_name} | In: {format_datetime(self.check_in)}"
        return (
            f"{self.full_name} | {self.worked} | "
            f"In: {format_datetime(self.check_in)} | Out: {format_datetime(self.check_out)}"
        )


@dataclass(frozen=True)
class EmployeeTotal:
    employee_id: str
    full_name: str
    worked: WorkedDuration


class AttendanceReportService:
    def __init__(self, ledger: AttendanceLedger, employees: EmployeeRepository):
        self._ledger = ledger
        self._employees = employees

    def working_hours(self) -> list[AttendanceReportRow]:
        return self._to_rows(self._ledger.completed_records())

    def currently_checked_in(self) -> list[AttendanceReportRow]:
        return self._to_rows(self._ledger.active_sessions())

    def between_dates(self, start: date, end: date) -> list[AttendanceReportRow]:
        return self._to_rows(self._ledger.records_in_range(start, end))

    def summary(self, rows: Sequence[AttendanceReportRow]) -> list[EmployeeTotal]:
        """Total worked time per employee, longest first."""
        totals: dict[str, EmployeeTotal] = {}
        for r in rows:
            if r.worked is None:
                continue
            t = totals.get(r.employee_id)
            minutes = r.worked.total_minutes + (t.worked.total_minutes if t else 0)
            totals[r.employee_id] = EmployeeTotal(
                employee_id=r.employee_id,
                full_name=r.full_name,
                worked=WorkedDuration(total_minutes=minutes),
            )

        return sorted(totals.values(), key=lambda x: x.worked.total_minutes, reverse=True)

    def _name_of(self, employee_id: str) -> str:
        employee = self._employees.get_by_id(employee_id)
        return employee.full_name if employee else UNKNOWN_EMPLOYEE_NAME

    def _to_rows(self, records: Iterable[AttendanceRecord]) -> list[AttendanceReportRow]:
        return [
            AttendanceReportRow(
                employee_id=r.employee_id,
                full_name=self._name_of(r.employee_id),
                check_in=r.check_in,
                check_out=r.check_out,
                worked=None if r.is_open else self._ledger.worked_duration(r),
            )
            for r in records
        ]
