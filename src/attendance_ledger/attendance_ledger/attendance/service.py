from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import AttendanceError, EmployeeNotFoundError
from ..employees.repository import EmployeeRepository
from .ledger import AttendanceLedger
from .model import AttendanceRecord

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: check employees in and out against the directory."""

    def __init__(self, ledger: AttendanceLedger, employees: EmployeeRepository):
        self._ledger = ledger
        self._employees = employees

    def check_in(self, employee_id: str, *, at: datetime | None = None) -> AttendanceRecord:
        at = at or now_local()

        if not self._employees.exists(employee_id):
            logger.warning("Check-in rejected: unknown employee %s", employee_id)
            raise EmployeeNotFoundError(employee_id)

        try:
            record = self._ledger.check_in(employee_id, at)
        except AttendanceError as exc:
            logger.warning("Check-in rejected for %s: %s", employee_id, exc)
            raise

        logger.info("Employee %s checked in at %s", employee_id, record.check_in)
        return record

    def check_out(self, employee_id: str, *, at: datetime | None = None) -> AttendanceRecord:
        at = at or now_local()

        try:
            record = self._ledger.check_out(employee_id, at)
        except AttendanceError as exc:
            logger.warning("Check-out rejected for %s: %s", employee_id, exc)
            raise

        logger.info(
            "Employee %s checked out at %s (%s)",
            employee_id,
            record.check_out,
            self._ledger.worked_duration(record),
        )
        return record

    def active_session(self, employee_id: str) -> Optional[AttendanceRecord]:
        return self._ledger.active_session(employee_id)
