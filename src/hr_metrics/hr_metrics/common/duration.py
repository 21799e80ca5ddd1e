from __future__ import annotations

import re
from datetime import datetime

from ..core.exceptions import MalformedDurationError

_DURATION_RE = re.compile(r"^\s*(\d+)h\s*(\d+)m\s*$")


def format_duration(minutes: int) -> str:
    """Render minutes as "{hours}h {minutes}m"."""
    if minutes < 0:
        raise ValueError("duration must not be negative")
    return f"{minutes // 60}h {minutes % 60}m"


def parse_duration(text: str) -> int:
    """Parse "{hours}h {minutes}m" back to total minutes."""
    match = _DURATION_RE.match(text or "")
    if not match:
        raise MalformedDurationError(f"Malformed duration: {text!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def duration_between(start: datetime, end: datetime) -> int:
    """Whole minutes elapsed from start to end, never below 0."""
    minutes = int((end - start).total_seconds() // 60)
    return max(minutes, 0)
