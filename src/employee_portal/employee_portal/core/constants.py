"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_HOURS = 24
DEFAULT_TREND_MONTHS = 6
# ten years; one store query per month
MAX_TREND_MONTHS = 120
MIN_PASSWORD_LENGTH = 6
UNKNOWN_EMPLOYEE_NAME = "Unknown"

EXPORT_COLUMNS = ["Employee ID", "Name", "Date", "Login Time", "Logout Time"]
EXPORT_SHEET_NAME = "Attendance"
