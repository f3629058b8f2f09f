from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Job role of an employee."""

    DEVELOPER = "Developer"
    TESTER = "Tester"
    MANAGER = "Manager"
    DESIGNER = "Designer"

    def __str__(self) -> str:
        return self.value


class SupervisorRole(str, Enum):
    """Who an employee reports to."""

    MANAGER = "Manager"
    CEO = "CEO"
    CTO = "CTO"

    def __str__(self) -> str:
        return self.value
