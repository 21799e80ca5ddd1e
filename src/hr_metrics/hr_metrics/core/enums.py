from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for approval permissions."""

    ADMIN = "admin"
    HR = "hr"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored on a record."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half-day"
    LEAVE = "leave"


class LeaveStatus(str, Enum):
    """Leave application approval flow."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class QuotaReservationPolicy(str, Enum):
    """Which leave applications consume quota."""

    APPROVED_ONLY = "approved_only"
    APPROVED_AND_PENDING = "approved_and_pending"

    def counted_statuses(self) -> frozenset[LeaveStatus]:
        if self is QuotaReservationPolicy.APPROVED_AND_PENDING:
            return frozenset({LeaveStatus.APPROVED, LeaveStatus.PENDING})
        return frozenset({LeaveStatus.APPROVED})
