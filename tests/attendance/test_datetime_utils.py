from datetime import date, datetime, timedelta, timezone

from hr_metrics.common.datetime_utils import month_bounds, to_naive_local


def test_naive_datetime_is_returned_unchanged():
    value = datetime(2025, 3, 3, 9, 0)

    assert to_naive_local(value) is value


def test_aware_datetime_is_converted_to_local_wall_clock():
    aware = datetime(2025, 3, 3, 12, 0, tzinfo=timezone(timedelta(hours=5)))

    naive = to_naive_local(aware)

    assert naive.tzinfo is None
    assert naive == aware.astimezone().replace(tzinfo=None)


def test_month_bounds_handles_leap_february():
    assert month_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
