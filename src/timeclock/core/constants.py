"""Constants and defaults.

Note: Keep key prefixes here so every repository builds keys the same way.
"""

USER_PREFIX = "user:"
SESSION_PREFIX = "session:"
ATTENDANCE_PREFIX = "attendance:"
BREAK_PREFIX = "break:"
TIME_REQUEST_PREFIX = "request:time:"
LEAVE_REQUEST_PREFIX = "request:leave:"
SCHEDULE_PREFIX = "schedule:"
CATEGORY_PREFIX = "category:"

SETTINGS_BREAK_TYPES_KEY = "settings:breakTypes"
SETTINGS_ACTIVITIES_KEY = "settings:activities"

DEFAULT_BREAK_TYPES = (
    "Coffee Break",
    "Lunch Break",
    "Rest Break",
    "Personal",
    "Bio Break",
)

DEFAULT_ACTIVITIES = (
    "Available",
    "On Call",
    "Email Support",
    "Chat Support",
    "Documentation",
    "Training",
    "Meeting",
)

SUPERADMIN_EMAIL = "superadmin@example.com"
SUPERADMIN_PASSWORD = "admin123"

MIN_PASSWORD_LENGTH = 6
UNKNOWN_DEVICE_NAME = "Unknown Device"
UNKNOWN = "Unknown"
