from __future__ import annotations

from decimal import Decimal

from ...common.numbers import round2, to_decimal
from ...core.constants import PAYROLL_DAYS_PER_MONTH
from ...core.enums import SalaryType
from ...core.exceptions import ValidationError
from ...users.model import User
from .base import SalaryBreakdown, SalaryCalculator


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: deduct (days_per_month - paid_days) x (monthly base / days_per_month).

    `days_per_month` is a fixed divisor, not the calendar length of the month.
    With `clamp_absence` (default) more paid days than the divisor never turn
    into negative deductions; without it they do, and total pay exceeds the base.

    Base and deductions are rounded to cents first and the total is their
    difference, so total_payable == base_salary - deductions always holds.
    """

    def __init__(self, *, days_per_month: int = PAYROLL_DAYS_PER_MONTH, clamp_absence: bool = True):
        if days_per_month <= 0:
            raise ValueError("days_per_month must be positive")
        self.days_per_month = int(days_per_month)
        self.clamp_absence = bool(clamp_absence)

    def monthly_base(self, user: User) -> Decimal:
        if user.salary is None:
            raise ValidationError(f"User {user.user_id} has no salary configured")
        salary = to_decimal(user.salary, "salary")
        if salary < 0:
            raise ValidationError(f"User {user.user_id} has a negative salary")
        if user.salary_type == SalaryType.ANNUAL:
            return salary / 12
        return salary

    def calculate(self, user: User, *, paid_days: int) -> SalaryBreakdown:
        monthly_base = self.monthly_base(user)
        per_day = monthly_base / self.days_per_month

        absent_days = self.days_per_month - int(paid_days)
        if self.clamp_absence:
            absent_days = max(absent_days, 0)

        base = round2(monthly_base)
        deductions = round2(per_day * absent_days)
        return SalaryBreakdown(
            monthly_base=base,
            per_day_salary=round2(per_day),
            paid_days=int(paid_days),
            absent_days=absent_days,
            deductions=deductions,
            total_payable=base - deductions,
        )
