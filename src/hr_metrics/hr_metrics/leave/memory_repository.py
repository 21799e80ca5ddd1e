from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from .model import LeaveApplication, LeaveQuota


class InMemoryLeaveQuotaRepository:
    def __init__(self, quotas: Sequence[LeaveQuota] = ()):
        self._quotas: dict[int, LeaveQuota] = {}
        self._next_id = 1
        for q in quotas:
            self._quotas[q.id] = q
            self._next_id = max(self._next_id, q.id + 1)

    def list_for_user(self, user_id: int) -> Sequence[LeaveQuota]:
        return [q for q in self._quotas.values() if q.user_id == user_id]

    def get_for_user_and_type(self, user_id: int, leave_type_id: int) -> Optional[LeaveQuota]:
        for q in self._quotas.values():
            if q.user_id == user_id and q.leave_type_id == leave_type_id:
                return q
        return None

    def create(self, *, user_id: int, leave_type_id: int, total_quota: int) -> LeaveQuota:
        if self.get_for_user_and_type(user_id, leave_type_id):
            raise ValidationError("Quota already exists for this leave type")
        quota = LeaveQuota(id=self._next_id, user_id=user_id, leave_type_id=leave_type_id, total_quota=total_quota)
        self._quotas[quota.id] = quota
        self._next_id += 1
        return quota


class InMemoryLeaveApplicationRepository:
    def __init__(self, applications: Sequence[LeaveApplication] = ()):
        self._apps: dict[int, LeaveApplication] = {}
        self._next_id = 1
        for a in applications:
            self._apps[a.id] = a
            self._next_id = max(self._next_id, a.id + 1)

    def get(self, application_id: int) -> Optional[LeaveApplication]:
        return self._apps.get(application_id)

    def list_for_user(self, user_id: int) -> Sequence[LeaveApplication]:
        items = [a for a in self._apps.values() if a.user_id == user_id]
        items.sort(key=lambda a: a.applied_at, reverse=True)
        return items

    def list_by_status(self, status: LeaveStatus) -> Sequence[LeaveApplication]:
        items = [a for a in self._apps.values() if a.status == status]
        items.sort(key=lambda a: a.applied_at)
        return items

    def create(
        self,
        *,
        user_id: int,
        leave_type_id: int,
        start_date: date,
        end_date: date,
        total_days: int,
        reason: str,
        applied_at: datetime,
    ) -> LeaveApplication:
        app = LeaveApplication(
            id=self._next_id,
            user_id=user_id,
            leave_type_id=leave_type_id,
            start_date=start_date,
            end_date=end_date,
            total_days=total_days,
            reason=reason,
            status=LeaveStatus.PENDING,
            applied_at=applied_at,
        )
        self._apps[app.id] = app
        self._next_id += 1
        return app

    def decide(
        self,
        *,
        application_id: int,
        status: LeaveStatus,
        decided_by: int,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        app = self._apps.get(application_id)
        if not app or app.status != LeaveStatus.PENDING:
            return False
        self._apps[application_id] = replace(
            app,
            status=status,
            decided_by=decided_by,
            decided_at=decided_at,
            admin_note=admin_note,
        )
        return True
