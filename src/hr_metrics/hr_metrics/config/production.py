import os

EXPECTED_WORKING_DAYS = int(os.getenv("EXPECTED_WORKING_DAYS", "22"))

LATE_CUTOFF = os.getenv("LATE_CUTOFF", "09:30")

QUOTA_POLICY = os.getenv("QUOTA_POLICY", "approved_only")

DEFAULT_LEAVE_COLOR = os.getenv("DEFAULT_LEAVE_COLOR", "#3B82F6")

DEBUG = False
