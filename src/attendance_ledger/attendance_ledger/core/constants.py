"""Constants and defaults.

Note: Keep constants here to avoid magic formats spread across code.
"""

DATETIME_FORMAT = "%Y-%m-%d %H:%M"
DATE_FORMAT = "%Y-%m-%d"

EMPLOYEE_ID_PREFIX = "E"
EMPLOYEE_ID_WIDTH = 3

UNKNOWN_EMPLOYEE_NAME = "Unknown"
