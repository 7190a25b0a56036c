import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worksync_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

BUSINESS_TIMEZONE = ""

PAYROLL_DAYS_PER_MONTH = 30
CLAMP_NEGATIVE_ABSENCE = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
