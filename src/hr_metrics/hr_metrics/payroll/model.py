from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class PayrollRecord:
    """One user's salary slip for a month. ``net_salary`` is always derived."""

    payroll_id: int
    user_id: int
    month: int
    year: int
    base_salary: int
    deductions: int
    bonus: int
    net_salary: int
    payment_status: PaymentStatus
    generated_at: datetime
    paid_at: Optional[datetime] = None


@dataclass(frozen=True)
class PayrollSummary:
    month: int
    year: int
    total_salaries: int
    paid_count: int
    pending_count: int
    record_count: int
