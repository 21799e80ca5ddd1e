from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: int, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        work_date: date,
        status: AttendanceStatus,
        check_in_time: Optional[datetime] = None,
        check_out_time: Optional[datetime] = None,
        working_hours: Optional[str] = None,
        regularization_reason: Optional[str] = None,
    ) -> AttendanceRecord:
        raise NotImplementedError

    def update_checkin(self, *, attendance_id: int, check_in_time: datetime) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        working_hours: str,
    ) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def regularize(
        self,
        *,
        attendance_id: int,
        check_in_time: datetime,
        check_out_time: Optional[datetime],
        working_hours: Optional[str],
        reason: str,
    ) -> Optional[AttendanceRecord]:
        """Admin-only override of check-in/out times."""

        raise NotImplementedError
