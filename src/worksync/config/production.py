import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "worksync"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worksync_db"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "")

PAYROLL_DAYS_PER_MONTH = int(os.getenv("PAYROLL_DAYS_PER_MONTH", "30"))
CLAMP_NEGATIVE_ABSENCE = bool(int(os.getenv("CLAMP_NEGATIVE_ABSENCE", "1")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
