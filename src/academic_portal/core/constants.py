"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ADMIN_ID = "admin"
DEFAULT_ADMIN_NAME = "Administrator"
DEFAULT_ADMIN_EMAIL = "admin@sbk.edu"
DEFAULT_FACULTY_ID = "FAC001"

COHORT_SPAN_YEARS = 3
BULK_ERROR_LIMIT = 10
DEFAULT_SESSION_TTL_MINUTES = 480

MIN_MARKS = 0
MAX_MARKS = 100
