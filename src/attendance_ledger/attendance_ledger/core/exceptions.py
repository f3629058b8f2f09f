from __future__ import annotations

from datetime import datetime


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class EmployeeNotFoundError(ValidationError):
    """Raised when an employee id is not in the directory."""

    def __init__(self, employee_id: str):
        super().__init__(f"Employee not found: {employee_id}")
        self.employee_id = employee_id


class AttendanceError(ValidationError):
    """Base class for rejected check-in/check-out transitions."""

    def __init__(self, message: str, *, employee_id: str):
        super().__init__(message)
        self.employee_id = employee_id


class AlreadyCheckedInError(AttendanceError):
    def __init__(self, employee_id: str, *, open_since: datetime):
        super().__init__(
            f"Employee {employee_id} is already checked in since {open_since:%Y-%m-%d %H:%M}",
            employee_id=employee_id,
        )
        self.open_since = open_since


class NoOpenSessionError(AttendanceError):
    def __init__(self, employee_id: str):
        super().__init__(f"No active check-in for employee {employee_id}", employee_id=employee_id)


class CrossDayCheckoutError(AttendanceError):
    """Check-out must fall on the same calendar date as the check-in."""

    def __init__(self, employee_id: str, *, check_in: datetime, check_out: datetime):
        super().__init__(
            f"Check-out must be on the same day as check-in ({check_in:%Y-%m-%d})",
            employee_id=employee_id,
        )
        self.check_in = check_in
        self.check_out = check_out


class ZeroDurationCheckoutError(AttendanceError):
    def __init__(self, employee_id: str, *, timestamp: datetime):
        super().__init__("Check-out time cannot be the same as check-in time", employee_id=employee_id)
        self.timestamp = timestamp


class CheckoutBeforeCheckinError(AttendanceError):
    def __init__(self, employee_id: str, *, check_in: datetime, check_out: datetime):
        super().__init__(
            f"Check-out time {check_out:%H:%M} is earlier than check-in time {check_in:%H:%M}",
            employee_id=employee_id,
        )
        self.check_in = check_in
        self.check_out = check_out


class OpenSessionError(AttendanceError):
    """Raised when a duration is requested for a record that is still open."""

    def __init__(self, employee_id: str):
        super().__init__(f"Record for employee {employee_id} is still open", employee_id=employee_id)
