from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveTypeMetadata:
    id: int
    name: str
    color_code: str
    is_annual: bool = False


@dataclass(frozen=True)
class LeaveQuota:
    """Days of one leave type allotted to a user for the period."""

    id: int
    user_id: int
    leave_type_id: int
    total_quota: int


@dataclass(frozen=True)
class LeaveApplication:
    id: int
    user_id: int
    leave_type_id: int
    start_date: date
    end_date: date
    total_days: int
    reason: str
    status: LeaveStatus
    applied_at: datetime
    decided_by: Optional[int] = None
    decided_at: Optional[datetime] = None
    admin_note: Optional[str] = None


@dataclass(frozen=True)
class LeaveBalance:
    """Read-model: a quota joined with its leave type and derived usage."""

    quota_id: int
    leave_type_id: int
    name: str
    color_code: str
    total_quota: int
    used_quota: int
    remaining_quota: int
    percent_remaining: float


@dataclass(frozen=True)
class LeaveUtilizationRow:
    leave_type_id: int
    leave_type: str
    total_quota: int
    used_quota: int
    remaining_quota: int
    utilization_percent: float
