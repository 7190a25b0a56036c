from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from ..common.validators import require_non_negative
from ..core.enums import SalaryStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class SalaryRecord:
    """Snapshot of one user's pay for one month ("YYYY-M")."""

    salary_id: int
    user_id: int
    month: str
    base_salary: Decimal
    deductions: Decimal
    total_payable: Decimal
    overtime_credits: Decimal = Decimal("0")
    status: SalaryStatus = SalaryStatus.UNPAID
    paid_date: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.salary_id,
            "user": self.user_id,
            "month": self.month,
            "baseSalary": float(self.base_salary),
            "deductions": float(self.deductions),
            "overtimeCredits": float(self.overtime_credits),
            "totalPayable": float(self.total_payable),
            "status": self.status.value,
            "paidDate": self.paid_date.isoformat() if self.paid_date else None,
        }


@dataclass(frozen=True)
class SalaryListRow:
    """Admin list view: salary joined with the employee name."""

    record: SalaryRecord
    employee_name: Optional[str]

    def to_dict(self) -> dict:
        r = self.record
        return {
            "id": r.salary_id,
            "employeeName": self.employee_name or "Unknown",
            "month": r.month,
            "baseSalary": float(r.base_salary),
            "deductions": float(r.deductions),
            "netPay": float(r.total_payable),
            "status": r.status.value.capitalize(),
        }


@dataclass(frozen=True)
class SalaryGeneration:
    record: SalaryRecord
    created: bool


@dataclass(frozen=True)
class BatchResult:
    created: list[SalaryRecord] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)
    failures: list[tuple[int, str]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.created)


@dataclass(frozen=True)
class SalaryAdjustment:
    """Manual edit of a salary record; None fields are left unchanged."""

    base_salary: Optional[Decimal] = None
    deductions: Optional[Decimal] = None
    status: Optional[SalaryStatus] = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "SalaryAdjustment":
        status = data.get("status")
        if status is not None:
            try:
                status = SalaryStatus(str(status).lower())
            except ValueError:
                raise ValidationError(f"Unknown salary status: {status!r}") from None

        base = data.get("baseSalary")
        deductions = data.get("deductions")
        return cls(
            base_salary=require_non_negative(base, "baseSalary") if base is not None else None,
            deductions=require_non_negative(deductions, "deductions") if deductions is not None else None,
            status=status,
        )
