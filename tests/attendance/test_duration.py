from datetime import datetime

import pytest

from hr_metrics.common.duration import duration_between, format_duration, parse_duration
from hr_metrics.core.exceptions import MalformedDurationError


def test_format_duration():
    assert format_duration(0) == "0h 0m"
    assert format_duration(59) == "0h 59m"
    assert format_duration(8 * 60 + 5) == "8h 5m"


def test_parse_duration_accepts_flexible_spacing():
    assert parse_duration("8h 0m") == 480
    assert parse_duration("7h30m") == 450
    assert parse_duration(" 10h  15m ") == 615


@pytest.mark.parametrize("text", ["", "8h", "8:30", "h m", "-1h 0m", None])
def test_parse_duration_rejects_malformed(text):
    with pytest.raises(MalformedDurationError):
        parse_duration(text)


@pytest.mark.parametrize("minutes", [*range(0, 24 * 60 + 1), 10_000, 99_999, 10**9])
def test_format_then_parse_returns_same_minutes(minutes):
    assert parse_duration(format_duration(minutes)) == minutes


def test_format_duration_rejects_negative():
    with pytest.raises(ValueError):
        format_duration(-1)


def test_duration_between_floors_and_never_negative():
    start = datetime(2025, 1, 1, 9, 0, 0)
    assert duration_between(start, datetime(2025, 1, 1, 17, 0, 59)) == 480
    assert duration_between(start, datetime(2025, 1, 1, 8, 0)) == 0
