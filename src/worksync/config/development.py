import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "worksync_db"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Empty means the server's local clock defines the business day.
BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "")

PAYROLL_DAYS_PER_MONTH = int(os.getenv("PAYROLL_DAYS_PER_MONTH", "30"))
CLAMP_NEGATIVE_ABSENCE = bool(int(os.getenv("CLAMP_NEGATIVE_ABSENCE", "1")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
