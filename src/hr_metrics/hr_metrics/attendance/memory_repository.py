from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    """Process-local attendance store keyed by (user_id, work_date)."""

    def __init__(self, records: Sequence[AttendanceRecord] = ()):
        self._by_id: dict[int, AttendanceRecord] = {}
        self._by_user_date: dict[tuple[int, date], int] = {}
        self._next_id = 1
        for r in records:
            self._store(r)
            self._next_id = max(self._next_id, r.attendance_id + 1)

    def _store(self, record: AttendanceRecord) -> AttendanceRecord:
        key = (record.user_id, record.work_date)
        existing = self._by_user_date.get(key)
        if existing is not None and existing != record.attendance_id:
            raise ValidationError("Attendance already recorded for this day")
        self._by_id[record.attendance_id] = record
        self._by_user_date[key] = record.attendance_id
        return record

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        attendance_id = self._by_user_date.get((user_id, work_date))
        if attendance_id is None:
            return None
        return self._by_id[attendance_id]

    def list_for_user(self, user_id: int, *, start: date, end: date) -> Sequence[AttendanceRecord]:
        items = [r for r in self._by_id.values() if r.user_id == user_id and start <= r.work_date <= end]
        items.sort(key=lambda r: r.work_date)
        return items

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
        record = AttendanceRecord(
            attendance_id=self._next_id,
            user_id=user_id,
            work_date=work_date,
            status=status,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            working_hours=working_hours,
            regularization_reason=regularization_reason,
        )
        self._store(record)
        self._next_id += 1
        return record

    def update_checkin(self, *, attendance_id: int, check_in_time: datetime) -> Optional[AttendanceRecord]:
        record = self._by_id.get(attendance_id)
        if not record:
            return None
        return self._store(replace(record, status=AttendanceStatus.PRESENT, check_in_time=check_in_time))

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        working_hours: str,
    ) -> Optional[AttendanceRecord]:
        record = self._by_id.get(attendance_id)
        if not record:
            return None
        return self._store(replace(record, check_out_time=check_out_time, working_hours=working_hours))

    def regularize(
        self,
        *,
        attendance_id: int,
        check_in_time: datetime,
        check_out_time: Optional[datetime],
        working_hours: Optional[str],
        reason: str,
    ) -> Optional[AttendanceRecord]:
        record = self._by_id.get(attendance_id)
        if not record:
            return None
        updated = replace(
            record,
            status=AttendanceStatus.PRESENT,
            check_in_time=check_in_time,
            check_out_time=check_out_time,
            working_hours=working_hours,
            regularization_reason=reason,
        )
        return self._store(updated)
