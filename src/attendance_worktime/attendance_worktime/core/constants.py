"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import date

# Asia/Dubai, fixed UTC+04:00 (no daylight saving).
DEFAULT_UTC_OFFSET_MINUTES = 240

# Earliest calendar day with trustworthy activity data.
DEFAULT_DATA_START_DATE = date(2025, 2, 4)

# A stored daily total above one physical day is corrupt, not "a long day".
DEFAULT_FALLBACK_MAX_MINUTES = 24 * 60

DEFAULT_AGENT_NAME = "Unknown"

PRESENT_STATUS = "present"

# Weekday keys used by the WORK_HOURS setting (index == date.weekday()).
WEEKDAY_NAMES = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

DEFAULT_WORK_HOURS = {
    "monday": ("10:00", "19:00"),
    "tuesday": ("10:00", "19:00"),
    "wednesday": ("10:00", "19:00"),
    "thursday": ("10:00", "19:00"),
    "friday": ("10:00", "19:00"),
    "saturday": ("10:00", "14:00"),
    "sunday": None,
}

# Activity kinds that count as work (breaks and idle time do not).
DEFAULT_WORK_ACTIVITY_KINDS = frozenset(
    {
        "data_collection",
        "customer_followup",
        "calling_telecalling",
        "calling_coldcalling",
        "calling_calllist_movement",
        "client_meeting",
        "admin_documentation",
        "training",
        "system_bank_portal",
    }
)

# Days added on each side of a requested range when fetching spans.
FETCH_BUFFER_DAYS = 1
