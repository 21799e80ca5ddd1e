import os

EXPECTED_WORKING_DAYS = int(os.getenv("EXPECTED_WORKING_DAYS", "22"))

# Check-ins after this clock time (minute precision) count as late
LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:30")

# approved_only | approved_and_pending
QUOTA_POLICY = os.getenv("QUOTA_POLICY", "approved_only")

DEFAULT_LEAVE_COLOR = os.getenv("DEFAULT_LEAVE_COLOR", "#3B82F6")

DEBUG = bool(int(os.getenv("DEBUG", "1")))
