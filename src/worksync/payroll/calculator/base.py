from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from ...users.model import User


@dataclass(frozen=True)
class SalaryBreakdown:
    monthly_base: Decimal
    per_day_salary: Decimal
    paid_days: int
    absent_days: int
    deductions: Decimal
    total_payable: Decimal


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def calculate(self, user: User, *, paid_days: int) -> SalaryBreakdown:
        raise NotImplementedError
