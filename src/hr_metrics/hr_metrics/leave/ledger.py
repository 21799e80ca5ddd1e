"""Leave quota arithmetic.

Usage is never stored on a quota row: it is derived every time by summing
``total_days`` over the user's applications whose status counts against
quota under the configured :class:`QuotaReservationPolicy`.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional, Sequence

from ..core.enums import QuotaReservationPolicy
from .catalog import LeaveTypeCatalog
from .model import LeaveApplication, LeaveBalance, LeaveQuota, LeaveUtilizationRow
from .repository import LeaveApplicationRepository, LeaveQuotaRepository


def used_days_by_type(
    applications: Iterable[LeaveApplication],
    *,
    user_id: int,
    policy: QuotaReservationPolicy = QuotaReservationPolicy.APPROVED_ONLY,
) -> dict[int, int]:
    counted = policy.counted_statuses()
    usage: dict[int, int] = defaultdict(int)
    for app in applications:
        if app.user_id == user_id and app.status in counted:
            usage[app.leave_type_id] += app.total_days
    return dict(usage)


def remaining(quota: LeaveQuota, used_days: int) -> int:
    """Remaining days; negative when the user is over quota."""
    return quota.total_quota - used_days


def percent_remaining(quota: LeaveQuota, used_days: int) -> float:
    if quota.total_quota <= 0:
        return 0.0
    return remaining(quota, used_days) / quota.total_quota * 100


def utilization_percent(quota: LeaveQuota, used_days: int) -> float:
    if quota.total_quota <= 0:
        return 0.0
    return used_days / quota.total_quota * 100


class LeaveQuotaLedger:
    def __init__(
        self,
        quotas: LeaveQuotaRepository,
        applications: LeaveApplicationRepository,
        *,
        catalog: Optional[LeaveTypeCatalog] = None,
        policy: QuotaReservationPolicy = QuotaReservationPolicy.APPROVED_ONLY,
    ):
        self._quotas = quotas
        self._applications = applications
        self._catalog = catalog or LeaveTypeCatalog()
        self._policy = policy

    def quotas_for_user(self, user_id: int) -> Sequence[LeaveQuota]:
        return list(self._quotas.list_for_user(user_id))

    def used_quota_by_type(self, user_id: int) -> dict[int, int]:
        return used_days_by_type(self._applications.list_for_user(user_id), user_id=user_id, policy=self._policy)

    def remaining_for_type(self, user_id: int, leave_type_id: int) -> Optional[int]:
        quota = self._quotas.get_for_user_and_type(user_id, leave_type_id)
        if quota is None:
            return None
        return remaining(quota, self.used_quota_by_type(user_id).get(leave_type_id, 0))

    def balances_for_user(self, user_id: int) -> list[LeaveBalance]:
        used = self.used_quota_by_type(user_id)
        balances = []
        for quota in self.quotas_for_user(user_id):
            used_days = used.get(quota.leave_type_id, 0)
            balances.append(
                LeaveBalance(
                    quota_id=quota.id,
                    leave_type_id=quota.leave_type_id,
                    name=self._catalog.resolve_name(quota.leave_type_id),
                    color_code=self._catalog.resolve_color(quota.leave_type_id),
                    total_quota=quota.total_quota,
                    used_quota=used_days,
                    remaining_quota=remaining(quota, used_days),
                    percent_remaining=percent_remaining(quota, used_days),
                )
            )
        return balances

    def utilization_report(self, user_id: int) -> list[LeaveUtilizationRow]:
        used = self.used_quota_by_type(user_id)
        rows = []
        for quota in self.quotas_for_user(user_id):
            used_days = used.get(quota.leave_type_id, 0)
            rows.append(
                LeaveUtilizationRow(
                    leave_type_id=quota.leave_type_id,
                    leave_type=self._catalog.resolve_name(quota.leave_type_id),
                    total_quota=quota.total_quota,
                    used_quota=used_days,
                    remaining_quota=remaining(quota, used_days),
                    utilization_percent=utilization_percent(quota, used_days),
                )
            )
        rows.sort(key=lambda r: r.leave_type_id)
        return rows
