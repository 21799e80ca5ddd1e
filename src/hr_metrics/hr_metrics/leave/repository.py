from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveApplication, LeaveQuota


class LeaveQuotaRepository(Protocol):
    def list_for_user(self, user_id: int) -> Sequence[LeaveQuota]:
        raise NotImplementedError

    def get_for_user_and_type(self, user_id: int, leave_type_id: int) -> Optional[LeaveQuota]:
        raise NotImplementedError

    def create(self, *, user_id: int, leave_type_id: int, total_quota: int) -> LeaveQuota:
        raise NotImplementedError


class LeaveApplicationRepository(Protocol):
    def get(self, application_id: int) -> Optional[LeaveApplication]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[LeaveApplication]:
        raise NotImplementedError

    def list_by_status(self, status: LeaveStatus) -> Sequence[LeaveApplication]:
        raise NotImplementedError

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
        raise NotImplementedError

    def decide(
        self,
        *,
        application_id: int,
        status: LeaveStatus,
        decided_by: int,
        decided_at: datetime,
        admin_note: Optional[str] = None,
    ) -> bool:
        """Move a pending application to a terminal status; False if not pending."""

        raise NotImplementedError
