EXPECTED_WORKING_DAYS = 22

LATE_CUTOFF = "09:30"

QUOTA_POLICY = "approved_only"

DEFAULT_LEAVE_COLOR = "#3B82F6"

DEBUG = False
TESTING = True
