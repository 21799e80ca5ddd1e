from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one user's attendance for one calendar day."""

    attendance_id: int
    user_id: int
    work_date: date
    status: AttendanceStatus
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    working_hours: Optional[str] = None
    regularization_reason: Optional[str] = None


@dataclass(frozen=True)
class AttendanceMetrics:
    """Read-model for the attendance summary of a period."""

    present_days: int
    leave_days: int
    absent_days: int
    half_days: int
    late_days: int
    average_working_minutes: int
    average_working_hours: str
    attendance_ratio: int
    expected_working_days: int


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for one user in a date-range attendance report.

    ``attendance_rate`` is present days over recorded days, not over the
    expected working days.
    """

    user_id: int
    start: date
    end: date
    total_days: int
    present_days: int
    absent_days: int
    half_days: int
    leave_days: int
    late_days: int
    attendance_rate: float
