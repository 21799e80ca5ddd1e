from __future__ import annotations

from datetime import date, datetime

import pytest

from hr_metrics.core.enums import LeaveStatus, QuotaReservationPolicy
from hr_metrics.leave.catalog import LeaveTypeCatalog
from hr_metrics.leave.ledger import LeaveQuotaLedger, percent_remaining, remaining, used_days_by_type
from hr_metrics.leave.memory_repository import InMemoryLeaveApplicationRepository, InMemoryLeaveQuotaRepository
from hr_metrics.leave.model import LeaveApplication, LeaveQuota, LeaveTypeMetadata


def _app(app_id, total_days, status, *, leave_type_id=1, user_id=1):
    start = date(2025, 1, app_id)
    return LeaveApplication(
        id=app_id,
        user_id=user_id,
        leave_type_id=leave_type_id,
        start_date=start,
        end_date=date(2025, 1, app_id + total_days - 1),
        total_days=total_days,
        reason="Personal",
        status=status,
        applied_at=datetime(2024, 12, 1, 9, 0),
    )


def _ledger(quotas, apps, **kwargs):
    return LeaveQuotaLedger(
        InMemoryLeaveQuotaRepository(quotas),
        InMemoryLeaveApplicationRepository(apps),
        **kwargs,
    )


def test_balance_from_approved_applications():
    quota = LeaveQuota(id=1, user_id=1, leave_type_id=1, total_quota=12)
    apps = [
        _app(1, 3, LeaveStatus.APPROVED),
        _app(10, 2, LeaveStatus.APPROVED),
        _app(20, 4, LeaveStatus.PENDING),
        _app(25, 1, LeaveStatus.REJECTED),
    ]

    [balance] = _ledger([quota], apps).balances_for_user(1)

    assert balance.used_quota == 5
    assert balance.remaining_quota == 7
    assert balance.percent_remaining == pytest.approx(58.33, abs=0.01)
    assert balance.name == "Paid Leave"


def test_zero_quota_has_zero_percent_remaining():
    quota = LeaveQuota(id=1, user_id=1, leave_type_id=1, total_quota=0)

    for used in (0, 1, 5):
        assert percent_remaining(quota, used) == 0


def test_over_quota_remaining_is_negative():
    quota = LeaveQuota(id=1, user_id=1, leave_type_id=1, total_quota=2)

    assert remaining(quota, 5) == -3
    assert percent_remaining(quota, 5) == -150


def test_unknown_leave_type_uses_placeholder():
    quota = LeaveQuota(id=1, user_id=1, leave_type_id=99, total_quota=5)

    [balance] = _ledger([quota], []).balances_for_user(1)

    assert balance.name == "Unknown Leave"
    assert balance.color_code == "#3B82F6"


def test_catalog_colors_and_custom_types():
    catalog = LeaveTypeCatalog([LeaveTypeMetadata(id=5, name="Study Leave", color_code="#111111")], default_color="#000000")

    assert catalog.resolve_name(5) == "Study Leave"
    assert catalog.resolve_color(5) == "#111111"
    assert catalog.resolve_color(1) == "#000000"
    assert catalog.get(1) is None


def test_used_quota_is_grouped_by_type_and_user():
    apps = [
        _app(1, 2, LeaveStatus.APPROVED, leave_type_id=1),
        _app(5, 1, LeaveStatus.APPROVED, leave_type_id=2),
        _app(8, 3, LeaveStatus.APPROVED, leave_type_id=2),
        _app(15, 4, LeaveStatus.APPROVED, leave_type_id=1, user_id=2),
    ]

    assert used_days_by_type(apps, user_id=1) == {1: 2, 2: 4}


def test_pending_reserves_quota_under_reservation_policy():
    quota = LeaveQuota(id=1, user_id=1, leave_type_id=1, total_quota=10)
    apps = [_app(1, 2, LeaveStatus.APPROVED), _app(10, 3, LeaveStatus.PENDING)]

    approved_only = _ledger([quota], apps)
    reserving = _ledger([quota], apps, policy=QuotaReservationPolicy.APPROVED_AND_PENDING)

    assert approved_only.used_quota_by_type(1) == {1: 2}
    assert reserving.used_quota_by_type(1) == {1: 5}
    assert reserving.remaining_for_type(1, 1) == 5


def test_utilization_report():
    quotas = [
        LeaveQuota(id=1, user_id=1, leave_type_id=2, total_quota=8),
        LeaveQuota(id=2, user_id=1, leave_type_id=1, total_quota=0),
    ]
    apps = [_app(1, 2, LeaveStatus.APPROVED, leave_type_id=2)]

    rows = _ledger(quotas, apps).utilization_report(1)

    assert [r.leave_type for r in rows] == ["Paid Leave", "Sick Leave"]
    assert rows[0].utilization_percent == 0
    assert rows[1].utilization_percent == 25
    assert rows[1].remaining_quota == 6


def test_quotas_for_user_ignores_other_users():
    quotas = [
        LeaveQuota(id=1, user_id=1, leave_type_id=1, total_quota=12),
        LeaveQuota(id=2, user_id=2, leave_type_id=1, total_quota=12),
    ]

    assert [q.id for q in _ledger(quotas, []).quotas_for_user(1)] == [1]
