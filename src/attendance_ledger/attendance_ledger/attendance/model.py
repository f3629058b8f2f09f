from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import format_datetime, format_duration


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in/check-out session of an employee."""

    record_id: int
    employee_id: str
    check_in: datetime
    check_out: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    @property
    def work_date(self) -> date:
        return self.check_in.date()

    def __str__(self) -> str:
        out = format_datetime(self.check_out) if self.check_out else "Still Checked-In"
        return f"Employee ID: {self.employee_id} | In: {format_datetime(self.check_in)} | Out: {out}"


@dataclass(frozen=True)
class WorkedDuration:
    """Elapsed time of a closed record, as whole hours plus remainder minutes."""

    total_minutes: int

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "WorkedDuration":
        return cls(total_minutes=int((end - start).total_seconds() // 60))

    @property
    def hours(self) -> int:
        return self.total_minutes // 60

    @property
    def minutes(self) -> int:
        return self.total_minutes % 60

    def as_timedelta(self) -> timedelta:
        return timedelta(minutes=self.total_minutes)

    def __str__(self) -> str:
        return format_duration(self.as_timedelta())
