"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 24 * 60

# Storage key layout
STAFF_KEY_PREFIX = "staff:"
ATTENDANCE_KEY_PREFIX = "attendance:"
PAYROLL_KEY_PREFIX = "payroll:"
SETTINGS_KEY = "system:settings"

# Fractional digits kept on aggregated hour buckets
HOURS_DIGITS = 1
