import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_portal_test"),
}

DEBUG = False
TESTING = True

# Tests run against the in-memory store unless told otherwise
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))

SESSION_HOURS = 1
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
