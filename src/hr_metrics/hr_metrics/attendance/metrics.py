from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, time
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from ..common.duration import format_duration, parse_duration
from ..core.constants import DEFAULT_EXPECTED_WORKING_DAYS, DEFAULT_LATE_CUTOFF
from ..core.enums import AttendanceStatus
from ..core.exceptions import MalformedDurationError
from .model import AttendanceMetrics, AttendanceRecord, AttendanceReportRow

logger = logging.getLogger("hr_metrics.attendance.metrics")


def records_in_period(
    records: Iterable[AttendanceRecord],
    *,
    user_id: int,
    start: date,
    end: date,
) -> list[AttendanceRecord]:
    """Records of one user whose work date falls in [start, end]."""
    return [r for r in records if r.user_id == user_id and start <= r.work_date <= end]


def is_late(record: AttendanceRecord, cutoff: time) -> bool:
    if record.check_in_time is None:
        return False
    return record.check_in_time.time().replace(second=0, microsecond=0) > cutoff


def attendance_ratio(present_days: int, expected_working_days: int) -> int:
    if expected_working_days <= 0:
        return 0
    ratio = Decimal(present_days) * 100 / Decimal(expected_working_days)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class AttendanceMetricsAggregator:
    """Summarizes a user's attendance records for one period.

    Lateness compares the check-in clock time against ``late_cutoff`` at
    minute precision, so 09:30:59 is still on time for a 09:30 cutoff.
    Working durations of every record are summed and divided by the number
    of present days; records whose duration string cannot be parsed are left
    out of the sum.
    """

    expected_working_days: int = DEFAULT_EXPECTED_WORKING_DAYS
    late_cutoff: time = DEFAULT_LATE_CUTOFF

    def aggregate(self, records: Sequence[AttendanceRecord]) -> AttendanceMetrics:
        counts = Counter(AttendanceStatus(r.status) for r in records)
        present_days = counts[AttendanceStatus.PRESENT]
        late_days = sum(1 for r in records if is_late(r, self.late_cutoff))

        total_minutes = 0
        for r in records:
            minutes = self._working_minutes(r)
            if minutes is not None:
                total_minutes += minutes

        average = total_minutes // present_days if present_days > 0 else 0

        return AttendanceMetrics(
            present_days=present_days,
            leave_days=counts[AttendanceStatus.LEAVE],
            absent_days=counts[AttendanceStatus.ABSENT],
            half_days=counts[AttendanceStatus.HALF_DAY],
            late_days=late_days,
            average_working_minutes=average,
            average_working_hours=format_duration(average),
            attendance_ratio=attendance_ratio(present_days, self.expected_working_days),
            expected_working_days=self.expected_working_days,
        )

    def report_row(
        self,
        records: Iterable[AttendanceRecord],
        *,
        user_id: int,
        start: date,
        end: date,
    ) -> AttendanceReportRow:
        """One user's row of the date-range report; records outside are ignored."""
        selected = records_in_period(records, user_id=user_id, start=start, end=end)
        counts = Counter(AttendanceStatus(r.status) for r in selected)
        total_days = len(selected)
        present_days = counts[AttendanceStatus.PRESENT]

        return AttendanceReportRow(
            user_id=user_id,
            start=start,
            end=end,
            total_days=total_days,
            present_days=present_days,
            absent_days=counts[AttendanceStatus.ABSENT],
            half_days=counts[AttendanceStatus.HALF_DAY],
            leave_days=counts[AttendanceStatus.LEAVE],
            late_days=sum(1 for r in selected if is_late(r, self.late_cutoff)),
            attendance_rate=present_days / total_days * 100 if total_days else 0.0,
        )

    @staticmethod
    def _working_minutes(record: AttendanceRecord) -> Optional[int]:
        if not record.working_hours:
            return None
        try:
            return parse_duration(record.working_hours)
        except MalformedDurationError:
            logger.warning(
                "skipping malformed working hours %r (attendance_id=%s)",
                record.working_hours,
                record.attendance_id,
            )
            return None


def aggregate_attendance(
    records: Sequence[AttendanceRecord],
    *,
    expected_working_days: int = DEFAULT_EXPECTED_WORKING_DAYS,
    late_cutoff: time = DEFAULT_LATE_CUTOFF,
) -> AttendanceMetrics:
    aggregator = AttendanceMetricsAggregator(
        expected_working_days=expected_working_days,
        late_cutoff=late_cutoff,
    )
    return aggregator.aggregate(records)
