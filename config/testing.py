DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

EMPLOYEE_ID_PREFIX = "E"

SEED_DEMO_EMPLOYEES = False
