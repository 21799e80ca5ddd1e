"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEFAULT_EXPECTED_WORKING_DAYS = 22
DEFAULT_LATE_CUTOFF = time(9, 30)
DEFAULT_LEAVE_COLOR = "#3B82F6"
UNKNOWN_LEAVE_NAME = "Unknown Leave"
MIN_REGULARIZATION_REASON_LENGTH = 3
