"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Rule engine
DEFAULT_LATENESS_GRACE_MINUTES = 5
DEFAULT_EARLY_GRACE_MINUTES = 5
DEFAULT_OVERTIME_THRESHOLD_HOURS = 12.0
DEFAULT_OVERTIME_SLACK_HOURS = 0.25
DEFAULT_BREAK_MINUTES_REQUIRED = 30
DEFAULT_BREAK_MIN_HOURS = 6.0
SHORT_HOURS_RATIO = 0.9
OVERTIME_HOURS_RATIO = 1.1
DISPUTE_RATIO = 0.1

# Billing / payroll
DEFAULT_HOURLY_RATE = 25.0
DEFAULT_PAY_RATE = 12.5
DEFAULT_TAX_RATE_PERCENT = 20.0
DEFAULT_OVERTIME_MULTIPLIER = 1.5
DEFAULT_INCOME_TAX_PERCENT = 0.20
DEFAULT_NI_PERCENT = 0.12
INVOICE_NUMBER_PREFIX = "INV"
CURRENCY_SYMBOL = "£"

# Listing windows
WEEK_DAYS = 7
MONTH_DAYS = 30

UNKNOWN_NAME = "Unknown"
NOT_AVAILABLE = "N/A"
