from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import PaymentStatus
from ..core.exceptions import ValidationError
from .model import PayrollRecord


class InMemoryPayrollRepository:
    def __init__(self, records: Sequence[PayrollRecord] = ()):
        self._records: dict[int, PayrollRecord] = {}
        self._next_id = 1
        for r in records:
            self._records[r.payroll_id] = r
            self._next_id = max(self._next_id, r.payroll_id + 1)

    def get(self, payroll_id: int) -> Optional[PayrollRecord]:
        return self._records.get(payroll_id)

    def get_for_period(self, user_id: int, month: int, year: int) -> Optional[PayrollRecord]:
        for r in self._records.values():
            if r.user_id == user_id and r.month == month and r.year == year:
                return r
        return None

    def list_for_user(self, user_id: int) -> Sequence[PayrollRecord]:
        items = [r for r in self._records.values() if r.user_id == user_id]
        items.sort(key=lambda r: (r.year, r.month), reverse=True)
        return items

    def list_for_period(self, month: int, year: int) -> Sequence[PayrollRecord]:
        return [r for r in self._records.values() if r.month == month and r.year == year]

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
        if self.get_for_period(user_id, month, year):
            raise ValidationError("Payroll already exists for this employee and month/year")
        record = PayrollRecord(
            payroll_id=self._next_id,
            user_id=user_id,
            month=month,
            year=year,
            base_salary=base_salary,
            deductions=deductions,
            bonus=bonus,
            net_salary=net_salary,
            payment_status=PaymentStatus.PENDING,
            generated_at=generated_at,
        )
        self._records[record.payroll_id] = record
        self._next_id += 1
        return record

    def mark_paid(self, *, payroll_id: int, paid_at: datetime) -> bool:
        record = self._records.get(payroll_id)
        if not record or record.payment_status != PaymentStatus.PENDING:
            return False
        self._records[payroll_id] = replace(record, payment_status=PaymentStatus.PAID, paid_at=paid_at)
        return True
