from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import inclusive_day_span, now_local
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import AuthorizationError, InvalidTransitionError, ValidationError
from .ledger import LeaveQuotaLedger
from .model import LeaveApplication, LeaveQuota
from .repository import LeaveApplicationRepository, LeaveQuotaRepository

logger = logging.getLogger("hr_metrics.leave")

_DECIDING_ROLES = frozenset({Role.ADMIN, Role.HR})


class LeaveService:
    def __init__(
        self,
        quotas: LeaveQuotaRepository,
        applications: LeaveApplicationRepository,
        ledger: LeaveQuotaLedger,
    ):
        self._quotas = quotas
        self._applications = applications
        self._ledger = ledger

    def grant_quota(self, *, user_id: int, leave_type_id: int, total_quota: int) -> LeaveQuota:
        require_non_negative(total_quota, "Total quota")
        if self._quotas.get_for_user_and_type(user_id, leave_type_id):
            raise ValidationError("Quota already exists for this leave type")
        quota = self._quotas.create(user_id=user_id, leave_type_id=leave_type_id, total_quota=int(total_quota))
        logger.info("granted quota user_id=%s leave_type_id=%s days=%s", user_id, leave_type_id, total_quota)
        return quota

    def apply(
        self,
        *,
        user_id: int,
        leave_type_id: int,
        start_date: date,
        end_date: date,
        reason: str,
        total_days: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> LeaveApplication:
        if end_date < start_date:
            raise ValidationError("End date cannot be before start date")
        reason = require_non_empty(reason, "Reason")

        span = inclusive_day_span(start_date, end_date)
        if total_days is None:
            total_days = span
        elif total_days != span:
            raise ValidationError(f"Total days must be {span} for the selected dates")

        quota = self._quotas.get_for_user_and_type(user_id, leave_type_id)
        if quota is None:
            raise ValidationError("You do not have a quota for this leave type")

        if self._overlaps(user_id, start_date, end_date):
            raise ValidationError("You have an overlapping leave request for these dates")

        remaining = self._ledger.remaining_for_type(user_id, leave_type_id) or 0
        if total_days > remaining:
            raise ValidationError(f"Insufficient leave balance. You only have {remaining} days remaining.")

        app = self._applications.create(
            user_id=user_id,
            leave_type_id=leave_type_id,
            start_date=start_date,
            end_date=end_date,
            total_days=total_days,
            reason=reason,
            applied_at=now or now_local(),
        )
        logger.info("leave application id=%s user_id=%s days=%s", app.id, user_id, total_days)
        return app

    def _overlaps(self, user_id: int, start_date: date, end_date: date) -> bool:
        for app in self._applications.list_for_user(user_id):
            if app.status not in (LeaveStatus.PENDING, LeaveStatus.APPROVED):
                continue
            if app.start_date <= end_date and app.end_date >= start_date:
                return True
        return False

    def approve(
        self,
        *,
        current_role: Role,
        admin_user_id: int,
        application_id: int,
        admin_note: str = "",
        now: Optional[datetime] = None,
    ) -> LeaveApplication:
        return self._decide(
            current_role=current_role,
            admin_user_id=admin_user_id,
            application_id=application_id,
            status=LeaveStatus.APPROVED,
            admin_note=admin_note,
            now=now,
        )

    def reject(
        self,
        *,
        current_role: Role,
        admin_user_id: int,
        application_id: int,
        admin_note: str = "",
        now: Optional[datetime] = None,
    ) -> LeaveApplication:
        return self._decide(
            current_role=current_role,
            admin_user_id=admin_user_id,
            application_id=application_id,
            status=LeaveStatus.REJECTED,
            admin_note=admin_note,
            now=now,
        )

    def _decide(
        self,
        *,
        current_role: Role,
        admin_user_id: int,
        application_id: int,
        status: LeaveStatus,
        admin_note: str,
        now: Optional[datetime],
    ) -> LeaveApplication:
        if current_role not in _DECIDING_ROLES:
            raise AuthorizationError("Only admin or HR can decide leave applications")

        app = self._applications.get(int(application_id))
        if not app:
            raise ValidationError("Leave application not found")
        if app.status != LeaveStatus.PENDING:
            raise InvalidTransitionError("Cannot update a non-pending leave request")

        decided = self._applications.decide(
            application_id=app.id,
            status=status,
            decided_by=int(admin_user_id),
            decided_at=now or now_local(),
            admin_note=(admin_note or "").strip() or None,
        )
        if not decided:
            raise InvalidTransitionError("Cannot update a non-pending leave request")

        logger.info("leave application id=%s %s by user_id=%s", app.id, status.value, admin_user_id)
        return self._applications.get(app.id)

    def applications_for_user(self, user_id: int) -> Sequence[LeaveApplication]:
        return self._applications.list_for_user(user_id)

    def pending_applications(self) -> Sequence[LeaveApplication]:
        return self._applications.list_by_status(LeaveStatus.PENDING)
