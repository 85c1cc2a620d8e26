"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

SECONDS_PER_HOUR = 3600
DEFAULT_SESSION_DAYS = 7
MIN_PASSWORD_LENGTH = 6

HHMM_FORMAT = "%H:%M"
ISO_DATE_FORMAT = "%Y-%m-%d"

NO_SCHEDULED_TIME_NOTE = "No scheduled time"
