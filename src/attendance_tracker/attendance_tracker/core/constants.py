"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TREND_DAYS = 7
DEFAULT_HISTORY_DAYS = 30
DEFAULT_PRESENT_PROBABILITY = 0.9

DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
INSIGHT_TEMPERATURE = 0.7
INSIGHT_TOP_P = 0.95
EMAIL_TEMPERATURE = 0.8

# (column id, label) in canonical export order
EXPORT_COLUMNS = (
    ("id", "Student ID"),
    ("name", "Full Name"),
    ("email", "Email Address"),
    ("grade", "Grade"),
    ("admissionDate", "Enrollment Date"),
    ("presentCount", "Present Days"),
    ("absentCount", "Absent Days"),
    ("lateCount", "Late Days"),
    ("rate", "Attendance %"),
)

REPORT_SHEET_TITLE = "Attendance Report"
REPORT_FILE_PREFIX = "attendance_summary"

INSIGHT_FALLBACK = "Unable to generate insights at this moment. Please check student records manually."
EMPTY_INSIGHT = "No insights available."
