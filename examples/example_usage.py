"""Example: use the service layer directly (no console menu).

Goal: show that the menu is only a thin layer, the rules live in the services.
"""

import importlib
from datetime import datetime

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    employee = container.employee_service.add_employee(
        first_name="Demo", last_name="User", role="Developer", reports_to="Manager"
    )
    container.attendance_service.check_in(employee.employee_id, at=datetime(2024, 1, 10, 9, 0))
    container.attendance_service.check_out(employee.employee_id, at=datetime(2024, 1, 10, 17, 30))

    for row in container.report_service.working_hours():
        print(row.render())


if __name__ == "__main__":
    main()
