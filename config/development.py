import os

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

EMPLOYEE_ID_PREFIX = os.getenv("EMPLOYEE_ID_PREFIX", "E")

# Adds a couple of demo employees on startup so check-in can be tried right away
SEED_DEMO_EMPLOYEES = bool(int(os.getenv("SEED_DEMO_EMPLOYEES", "1")))
