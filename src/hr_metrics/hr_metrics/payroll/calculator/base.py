from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

Amount = Union[int, str, None]


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def net_salary(self, base_salary: Amount, deductions: Amount = 0, bonus: Amount = 0) -> int:
        raise NotImplementedError
