from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def get_for_period(self, user_id: int, month: int, year: int) -> Optional[PayrollRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def list_for_period(self, month: int, year: int) -> Sequence[PayrollRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        month: int,
        year: int,
        base_salary: int,
        deductions: int,
        bonus: int,
        net_salary: int,
        generated_at: datetime,
    ) -> PayrollRecord:
        raise NotImplementedError

    def mark_paid(self, *, payroll_id: int, paid_at: datetime) -> bool:
        """Set a pending record to paid; False if missing or already paid."""

        raise NotImplementedError
