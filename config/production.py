import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

EMPLOYEE_ID_PREFIX = os.getenv("EMPLOYEE_ID_PREFIX", "E")

SEED_DEMO_EMPLOYEES = bool(int(os.getenv("SEED_DEMO_EMPLOYEES", "0")))
