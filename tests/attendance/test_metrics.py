from datetime import date, datetime, time

from hr_metrics.attendance.metrics import (
    AttendanceMetricsAggregator,
    aggregate_attendance,
    attendance_ratio,
    records_in_period,
)
from hr_metrics.attendance.model import AttendanceRecord
from hr_metrics.core.enums import AttendanceStatus


def _record(attendance_id, status, *, day=3, check_in=None, working_hours=None, user_id=1):
    return AttendanceRecord(
        attendance_id=attendance_id,
        user_id=user_id,
        work_date=date(2025, 3, day),
        status=status,
        check_in_time=datetime(2025, 3, day, *check_in) if check_in else None,
        working_hours=working_hours,
    )


def test_empty_records_yield_zeroes():
    metrics = aggregate_attendance([], expected_working_days=22)

    assert metrics.present_days == 0
    assert metrics.leave_days == 0
    assert metrics.late_days == 0
    assert metrics.average_working_hours == "0h 0m"
    assert metrics.attendance_ratio == 0


def test_single_late_present_record():
    records = [_record(1, AttendanceStatus.PRESENT, check_in=(9, 45), working_hours="8h 0m")]

    metrics = aggregate_attendance(records, expected_working_days=22)

    assert metrics.present_days == 1
    assert metrics.late_days == 1
    assert metrics.average_working_hours == "8h 0m"
    assert metrics.average_working_minutes == 480
    assert metrics.attendance_ratio == 5


def test_late_cutoff_is_minute_precision():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3, check_in=(9, 30, 59)),
        _record(2, AttendanceStatus.PRESENT, day=4, check_in=(9, 31)),
        _record(3, AttendanceStatus.PRESENT, day=5, check_in=(8, 55)),
    ]

    assert aggregate_attendance(records).late_days == 1


def test_late_cutoff_is_configurable():
    records = [_record(1, AttendanceStatus.PRESENT, check_in=(9, 10))]

    aggregator = AttendanceMetricsAggregator(late_cutoff=time(9, 0))

    assert aggregator.aggregate(records).late_days == 1


def test_missing_check_in_is_never_late():
    records = [_record(1, AttendanceStatus.ABSENT), _record(2, AttendanceStatus.LEAVE, day=4)]

    metrics = aggregate_attendance(records)

    assert metrics.late_days == 0
    assert metrics.leave_days == 1


def test_malformed_working_hours_are_skipped():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3, working_hours="8h 0m"),
        _record(2, AttendanceStatus.PRESENT, day=4, working_hours="eight hours"),
    ]

    metrics = aggregate_attendance(records)

    assert metrics.present_days == 2
    assert metrics.average_working_hours == "4h 0m"


def test_average_is_floored_to_whole_minutes():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3, working_hours="8h 0m"),
        _record(2, AttendanceStatus.PRESENT, day=4, working_hours="7h 1m"),
    ]

    assert aggregate_attendance(records).average_working_hours == "7h 30m"


def test_status_counts_are_exclusive():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3),
        _record(2, AttendanceStatus.LEAVE, day=4),
        _record(3, AttendanceStatus.HALF_DAY, day=5),
        _record(4, AttendanceStatus.ABSENT, day=6),
    ]

    metrics = aggregate_attendance(records)

    assert metrics.present_days + metrics.leave_days <= len(records)
    assert (metrics.present_days, metrics.leave_days) == (1, 1)


def test_aggregation_is_idempotent():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3, check_in=(9, 40), working_hours="8h 10m"),
        _record(2, AttendanceStatus.LEAVE, day=4),
    ]

    assert aggregate_attendance(records) == aggregate_attendance(records)


def test_ratio_guards_zero_expected_days_and_rounds_half_up():
    assert attendance_ratio(5, 0) == 0
    assert attendance_ratio(1, 8) == 13
    assert attendance_ratio(11, 22) == 50
    assert attendance_ratio(22, 22) == 100


def test_records_in_period_filters_user_and_dates():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=1),
        _record(2, AttendanceStatus.PRESENT, day=15),
        _record(3, AttendanceStatus.PRESENT, day=15, user_id=2),
        _record(4, AttendanceStatus.PRESENT, day=31),
    ]

    selected = records_in_period(records, user_id=1, start=date(2025, 3, 10), end=date(2025, 3, 31))

    assert [r.attendance_id for r in selected] == [2, 4]


def test_absent_and_half_days_are_counted():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3),
        _record(2, AttendanceStatus.ABSENT, day=4),
        _record(3, AttendanceStatus.ABSENT, day=5),
        _record(4, AttendanceStatus.HALF_DAY, day=6),
    ]

    metrics = aggregate_attendance(records)

    assert (metrics.absent_days, metrics.half_days) == (2, 1)
    assert metrics.present_days + metrics.leave_days + metrics.absent_days + metrics.half_days == len(records)


def test_report_row_rates_present_days_over_recorded_days():
    records = [
        _record(1, AttendanceStatus.PRESENT, day=3, check_in=(9, 45)),
        _record(2, AttendanceStatus.PRESENT, day=4, check_in=(9, 0)),
        _record(3, AttendanceStatus.PRESENT, day=5, check_in=(9, 0)),
        _record(4, AttendanceStatus.ABSENT, day=6),
        _record(5, AttendanceStatus.PRESENT, day=20, check_in=(10, 0)),
        _record(6, AttendanceStatus.PRESENT, day=4, user_id=2),
    ]

    row = AttendanceMetricsAggregator().report_row(records, user_id=1, start=date(2025, 3, 1), end=date(2025, 3, 10))

    assert row.total_days == 4
    assert (row.present_days, row.absent_days, row.half_days, row.late_days) == (3, 1, 0, 1)
    assert row.attendance_rate == 75


def test_report_row_without_records_has_zero_rate():
    row = AttendanceMetricsAggregator().report_row([], user_id=1, start=date(2025, 3, 1), end=date(2025, 3, 31))

    assert row.total_days == 0
    assert row.attendance_rate == 0
