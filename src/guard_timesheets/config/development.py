import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "guard_timesheets"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Keys mirror RuleConfig / BillingConfig fields; unset keys use the defaults.
RULES = {
    "lateness_grace_minutes": os.getenv("LATENESS_GRACE_MINUTES", "5"),
    "early_grace_minutes": os.getenv("EARLY_GRACE_MINUTES", "5"),
    "overtime_threshold_hours": os.getenv("OVERTIME_THRESHOLD_HOURS", "12"),
    "overtime_slack_hours": os.getenv("OVERTIME_SLACK_HOURS", "0.25"),
    "break_minutes_required": os.getenv("BREAK_MINUTES_REQUIRED", "30"),
    "break_min_hours": os.getenv("BREAK_MIN_HOURS", "6"),
}

BILLING = {
    "default_hourly_rate": os.getenv("DEFAULT_HOURLY_RATE", "25.0"),
    "default_tax_rate_percent": os.getenv("DEFAULT_TAX_RATE_PERCENT", "20"),
}
