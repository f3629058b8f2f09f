"""In-memory attendance ledger.

The ledger is an append-only list of `AttendanceRecord` in insertion order.
An index maps each employee to the position of their open record, so the
one-open-session rule is checked without scanning the log. Records are
frozen; closing a session swaps the stored record for a closed copy.

The ledger never logs and never substitutes values: every rejected
transition raises an `AttendanceError` subclass and leaves state unchanged.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Iterator, Optional

from ..common.datetime_utils import truncate_to_minute
from ..core.exceptions import (
    AlreadyCheckedInError,
    CheckoutBeforeCheckinError,
    CrossDayCheckoutError,
    NoOpenSessionError,
    OpenSessionError,
    ZeroDurationCheckoutError,
)
from .model import AttendanceRecord, WorkedDuration


class AttendanceLedger:
    def __init__(self):
        self._records: list[AttendanceRecord] = []
        self._open_by_employee: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AttendanceRecord]:
        return iter(list(self._records))

    def check_in(self, employee_id: str, timestamp: datetime) -> AttendanceRecord:
        current = self.active_session(employee_id)
        if current:
            raise AlreadyCheckedInError(employee_id, open_since=current.check_in)

        record = AttendanceRecord(
            record_id=len(self._records) + 1,
            employee_id=employee_id,
            check_in=truncate_to_minute(timestamp),
        )
        self._records.append(record)
        self._open_by_employee[employee_id] = len(self._records) - 1
        return record

    def check_out(self, employee_id: str, timestamp: datetime) -> AttendanceRecord:
        position = self._open_by_employee.get(employee_id)
        if position is None:
            raise NoOpenSessionError(employee_id)

        record = self._records[position]
        check_out = truncate_to_minute(timestamp)
        if check_out.date() != record.check_in.date():
            raise CrossDayCheckoutError(employee_id, check_in=record.check_in, check_out=check_out)
        if check_out == record.check_in:
            raise ZeroDurationCheckoutError(employee_id, timestamp=check_out)
        if check_out < record.check_in:
            raise CheckoutBeforeCheckinError(employee_id, check_in=record.check_in, check_out=check_out)

        closed = replace(record, check_out=check_out)
        self._records[position] = closed
        del self._open_by_employee[employee_id]
        return closed

    def active_session(self, employee_id: str) -> Optional[AttendanceRecord]:
        position = self._open_by_employee.get(employee_id)
        if position is None:
            return None
        return self._records[position]

    def active_sessions(self) -> list[AttendanceRecord]:
        return [self._records[p] for p in sorted(self._open_by_employee.values())]

    def completed_records(self) -> list[AttendanceRecord]:
        return [r for r in self._records if not r.is_open]

    def records_in_range(self, start: date, end: date) -> list[AttendanceRecord]:
        """Completed records whose check-in date is within [start, end]."""
        if start > end:
            return []
        return [r for r in self.completed_records() if start <= r.work_date <= end]

    @staticmethod
    def worked_duration(record: AttendanceRecord) -> WorkedDuration:
        if record.check_out is None:
            raise OpenSessionError(record.employee_id)
        return WorkedDuration.between(record.check_in, record.check_out)
