from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from ..core.enums import SalaryStatus
from .model import SalaryListRow, SalaryRecord


class SalaryRepository(Protocol):
    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def get_for_user_and_month(self, user_id: int, month: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def list_for_user(self, user_id: int) -> Sequence[SalaryRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[SalaryListRow]:
        raise NotImplementedError

    def create(
        self,
        *,
        user_id: int,
        month: str,
        base_salary: Decimal,
        deductions: Decimal,
        total_payable: Decimal,
    ) -> SalaryRecord:
        """Insert an unpaid record; raises DuplicateRecordError if (user, month) exists."""

        raise NotImplementedError

    def update(
        self,
        *,
        salary_id: int,
        base_salary: Decimal,
        deductions: Decimal,
        total_payable: Decimal,
        status: SalaryStatus,
        paid_date: Optional[datetime],
    ) -> None:
        raise NotImplementedError
