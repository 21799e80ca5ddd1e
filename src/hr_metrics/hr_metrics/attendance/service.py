from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Iterable, Optional

from ..common.datetime_utils import month_bounds, now_local, to_naive_local
from ..common.duration import duration_between, format_duration
from ..common.validators import require_min_length
from ..core.constants import MIN_REGULARIZATION_REASON_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .metrics import AttendanceMetricsAggregator
from .model import AttendanceMetrics, AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

logger = logging.getLogger("hr_metrics.attendance")


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        aggregator: Optional[AttendanceMetricsAggregator] = None,
    ):
        self._attendance = attendance
        self._aggregator = aggregator or AttendanceMetricsAggregator()

    def check_in(self, user_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = to_naive_local(now or now_local())
        today = now.date()

        existing = self._attendance.get_for_user_and_date(user_id, today)
        if existing and existing.check_in_time is not None:
            raise ValidationError("Already checked in today")
        if existing:
            # A record without check-in (e.g. marked absent) is taken over by the check-in.
            record = self._attendance.update_checkin(attendance_id=existing.attendance_id, check_in_time=now)
            if record is None:
                raise ValidationError("Check-in failed")
        else:
            record = self._attendance.create(
                user_id=user_id,
                work_date=today,
                status=AttendanceStatus.PRESENT,
                check_in_time=now,
            )

        logger.info("check-in user_id=%s date=%s", user_id, today)
        return record

    def check_out(self, user_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = to_naive_local(now or now_local())
        today = now.date()

        record = self._attendance.get_for_user_and_date(user_id, today)
        if not record or record.check_in_time is None:
            raise ValidationError("No check-in recorded today")
        if record.check_out_time is not None:
            raise ValidationError("Already checked out today")
        check_in_time = to_naive_local(record.check_in_time)
        if now < check_in_time:
            raise ValidationError("Check-out cannot be earlier than check-in")

        working_hours = format_duration(duration_between(check_in_time, now))
        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            working_hours=working_hours,
        )
        if updated is None:
            raise ValidationError("Check-out failed")

        logger.info("check-out user_id=%s date=%s worked=%s", user_id, today, working_hours)
        return updated

    def regularize(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in: time,
        check_out: Optional[time],
        reason: str,
    ) -> AttendanceRecord:
        """Correct a missed or wrong check-in/out; a reason is mandatory."""

        reason = require_min_length(reason, "Reason", MIN_REGULARIZATION_REASON_LENGTH)

        check_in_time = datetime.combine(work_date, check_in)
        check_out_time = datetime.combine(work_date, check_out) if check_out else None
        if check_out_time and check_out_time < check_in_time:
            raise ValidationError("Check-out cannot be earlier than check-in")

        working_hours = None
        if check_out_time:
            working_hours = format_duration(duration_between(check_in_time, check_out_time))

        existing = self._attendance.get_for_user_and_date(user_id, work_date)
        if existing:
            record = self._attendance.regularize(
                attendance_id=existing.attendance_id,
                check_in_time=check_in_time,
                check_out_time=check_out_time,
                working_hours=working_hours,
                reason=reason,
            )
            if record is None:
                raise ValidationError("Regularization failed")
        else:
            record = self._attendance.create(
                user_id=user_id,
                work_date=work_date,
                status=AttendanceStatus.PRESENT,
                check_in_time=check_in_time,
                check_out_time=check_out_time,
                working_hours=working_hours,
                regularization_reason=reason,
            )

        logger.info("regularized attendance user_id=%s date=%s", user_id, work_date)
        return record

    def get_today_record(self, user_id: int, today: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_user_and_date(user_id, today)

    def monthly_metrics(self, user_id: int, *, year: int, month: int) -> AttendanceMetrics:
        start, end = month_bounds(year, month)
        records = self._attendance.list_for_user(user_id, start=start, end=end)
        return self._aggregator.aggregate(records)

    def attendance_report(self, user_ids: Iterable[int], *, start: date, end: date) -> list[AttendanceReportRow]:
        """Per-user attendance rows for [start, end], in the order the users are given."""
        if end < start:
            raise ValidationError("End date cannot be before start date")

        rows = []
        for user_id in dict.fromkeys(user_ids):
            records = self._attendance.list_for_user(user_id, start=start, end=end)
            rows.append(self._aggregator.report_row(records, user_id=user_id, start=start, end=end))
        return rows
