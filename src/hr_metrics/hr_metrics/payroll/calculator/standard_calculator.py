from __future__ import annotations

import logging

from .base import Amount, PayrollCalculator

logger = logging.getLogger("hr_metrics.payroll.calculator")


def parse_whole_number(value: Amount) -> int:
    """Whole number from an int or a numeric string with optional thousands separators.

    Raises ValueError when the text is not a whole number.
    """
    if isinstance(value, bool):
        raise ValueError(f"not an amount: {value!r}")
    if isinstance(value, int):
        return value
    return int(str(value).strip().replace(",", ""))


def parse_amount(value: Amount, field_name: str) -> int:
    """Whole non-negative amount from an int or a free-form numeric string.

    Empty input is 0. Anything unparseable or negative is logged and treated
    as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, str) and not value.strip():
        return 0
    try:
        amount = parse_whole_number(value)
    except ValueError:
        logger.warning("invalid %s %r, using 0", field_name, value)
        return 0
    if amount < 0:
        logger.warning("negative %s %r, using 0", field_name, value)
        return 0
    return amount


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base - deductions + bonus. A negative result is kept."""

    def net_salary(self, base_salary: Amount, deductions: Amount = 0, bonus: Amount = 0) -> int:
        base = parse_amount(base_salary, "base salary")
        return base - parse_amount(deductions, "deductions") + parse_amount(bonus, "bonus")
