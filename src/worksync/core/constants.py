"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Overtime threshold when no usable shift is configured.
DEFAULT_STANDARD_SHIFT_HOURS = 9

# Fixed payroll divisor; not calendar-accurate.
PAYROLL_DAYS_PER_MONTH = 30

SETTINGS_ROW_ID = 1

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
