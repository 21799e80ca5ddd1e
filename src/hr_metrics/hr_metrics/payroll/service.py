from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import PaymentStatus
from ..core.exceptions import InvalidTransitionError, ValidationError
from .calculator.base import Amount, PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator, parse_amount, parse_whole_number
from .model import PayrollRecord, PayrollSummary
from .repository import PayrollRepository

logger = logging.getLogger("hr_metrics.payroll")


class PayrollService:
    def __init__(
        self,
        payrolls: PayrollRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._payrolls = payrolls
        self._calculator = calculator or StandardPayrollCalculator()

    @staticmethod
    def _require_base_salary(value: Amount) -> int:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError("Base salary is required")
        try:
            amount = parse_whole_number(value)
        except ValueError:
            raise ValidationError("Base salary must be a whole number")
        if amount < 0:
            raise ValidationError("Base salary must not be negative")
        return amount

    @staticmethod
    def _require_period(month, year) -> tuple[int, int]:
        try:
            month = int(month)
        except (TypeError, ValueError):
            raise ValidationError("Month must be between 1 and 12")
        if not 1 <= month <= 12:
            raise ValidationError("Month must be between 1 and 12")
        try:
            year = int(year)
        except (TypeError, ValueError):
            raise ValidationError("Year must be a whole number")
        return month, year

    def generate(
        self,
        *,
        user_id: int,
        month: int,
        year: int,
        base_salary: Amount,
        deductions: Amount = 0,
        bonus: Amount = 0,
        now: Optional[datetime] = None,
    ) -> PayrollRecord:
        month, year = self._require_period(month, year)
        base = self._require_base_salary(base_salary)
        deductions_amount = parse_amount(deductions, "deductions")
        bonus_amount = parse_amount(bonus, "bonus")

        if self._payrolls.get_for_period(user_id, month, year):
            raise ValidationError("Payroll already exists for this employee and month/year")

        net = self._calculator.net_salary(base, deductions_amount, bonus_amount)
        if net < 0:
            logger.warning("negative net salary %s for user_id=%s %s/%s", net, user_id, month, year)

        record = self._payrolls.create(
            user_id=user_id,
            month=month,
            year=year,
            base_salary=base,
            deductions=deductions_amount,
            bonus=bonus_amount,
            net_salary=net,
            generated_at=now or now_local(),
        )
        logger.info("generated payroll id=%s user_id=%s %s/%s net=%s", record.payroll_id, user_id, month, year, net)
        return record

    def mark_paid(self, payroll_id: int, *, now: Optional[datetime] = None) -> PayrollRecord:
        record = self._payrolls.get(int(payroll_id))
        if not record:
            raise ValidationError("Payroll record not found")
        if record.payment_status != PaymentStatus.PENDING:
            raise InvalidTransitionError("Payroll record is already paid")

        if not self._payrolls.mark_paid(payroll_id=record.payroll_id, paid_at=now or now_local()):
            raise InvalidTransitionError("Payroll record is already paid")

        logger.info("payroll id=%s marked paid", record.payroll_id)
        return self._payrolls.get(record.payroll_id)

    def records_for_user(self, user_id: int) -> Sequence[PayrollRecord]:
        return self._payrolls.list_for_user(user_id)

    def summary(self, *, month: int, year: int) -> PayrollSummary:
        month, year = self._require_period(month, year)
        records = self._payrolls.list_for_period(month, year)
        return PayrollSummary(
            month=month,
            year=year,
            total_salaries=sum(r.net_salary for r in records),
            paid_count=sum(1 for r in records if r.payment_status == PaymentStatus.PAID),
            pending_count=sum(1 for r in records if r.payment_status == PaymentStatus.PENDING),
            record_count=len(records),
        )
