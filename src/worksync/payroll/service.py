from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock, month_token, month_window
from ..common.numbers import round2
from ..common.validators import require_month, require_year
from ..core.enums import PAID_ATTENDANCE_STATUSES, Role, SalaryStatus
from ..core.exceptions import AuthorizationError, RecordNotFound, UserNotFound
from ..users.model import Actor
from ..users.repository import UserRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import BatchResult, SalaryAdjustment, SalaryGeneration, SalaryListRow, SalaryRecord
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class PayrollService:
    """Turns a month of committed attendance into salary records."""

    def __init__(
        self,
        salaries: SalaryRepository,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
        clock: Optional[Clock] = None,
    ):
        self._salaries = salaries
        self._attendance = attendance
        self._users = users
        self._calculator = calculator or StandardSalaryCalculator()
        self._clock = clock or SystemClock()

    def generate_salary(self, user_id: int, month: int, year: int) -> SalaryGeneration:
        """Create the (user, month) record unless one already exists.

        An existing record is returned untouched with created=False.
        """

        month = require_month(month)
        year = require_year(year)

        user = self._users.get_by_id(user_id)
        if not user:
            raise UserNotFound(f"User {user_id} not found")

        token = month_token(year, month)
        existing = self._salaries.get_for_user_and_month(user.user_id, token)
        if existing:
            logger.debug("salary for user %s month %s already exists", user.user_id, token)
            return SalaryGeneration(record=existing, created=False)

        start, end = month_window(year, month)
        paid_days = self._attendance.count_for_user_between(
            user.user_id, start, end, statuses=PAID_ATTENDANCE_STATUSES
        )
        breakdown = self._calculator.calculate(user, paid_days=paid_days)

        # The unique (user_id, salary_month) key rejects a concurrent duplicate here.
        record = self._salaries.create(
            user_id=user.user_id,
            month=token,
            base_salary=breakdown.monthly_base,
            deductions=breakdown.deductions,
            total_payable=breakdown.total_payable,
        )
        logger.info(
            "salary generated for user %s month %s: paid_days=%s total=%s",
            user.user_id, token, paid_days, record.total_payable,
        )
        return SalaryGeneration(record=record, created=True)

    def generate_batch(self, month: int, year: int) -> BatchResult:
        """Generate salaries for every employee; one failure never stops the rest."""

        month = require_month(month)
        year = require_year(year)

        result = BatchResult()
        for employee in self._users.list_by_role(Role.EMPLOYEE):
            try:
                outcome = self.generate_salary(employee.user_id, month, year)
            except Exception as e:
                logger.exception("salary generation failed for user %s", employee.user_id)
                result.failures.append((employee.user_id, str(e)))
                continue

            if outcome.created:
                result.created.append(outcome.record)
            else:
                result.skipped.append(employee.user_id)

        logger.info(
            "batch salary %s: created=%d skipped=%d failed=%d",
            month_token(year, month), result.count, len(result.skipped), len(result.failures),
        )
        return result

    def mark_paid(self, salary_id: int) -> SalaryRecord:
        record = self._require(salary_id)
        paid = self._save(record, status=SalaryStatus.PAID, paid_date=self._clock.now())
        logger.info("salary %s marked paid", salary_id)
        return paid

    def adjust_salary(self, salary_id: int, adjustment: SalaryAdjustment) -> SalaryRecord:
        record = self._require(salary_id)

        base = record.base_salary if adjustment.base_salary is None else round2(adjustment.base_salary)
        deductions = record.deductions if adjustment.deductions is None else round2(adjustment.deductions)
        total = record.total_payable
        if adjustment.base_salary is not None or adjustment.deductions is not None:
            total = base - deductions

        status = adjustment.status or record.status
        paid_date = record.paid_date
        if status == SalaryStatus.PAID and paid_date is None:
            paid_date = self._clock.now()
        elif status == SalaryStatus.UNPAID:
            paid_date = None

        return self._save(
            record,
            base_salary=base,
            deductions=deductions,
            total_payable=total,
            status=status,
            paid_date=paid_date,
        )

    def list_for_user(self, user_id: int, *, actor: Actor) -> Sequence[SalaryRecord]:
        if not actor.is_privileged and actor.user_id != int(user_id):
            raise AuthorizationError("Not authorized")
        return self._salaries.list_for_user(user_id)

    def list_all(self) -> Sequence[SalaryListRow]:
        return self._salaries.list_all()

    def _require(self, salary_id: int) -> SalaryRecord:
        record = self._salaries.get_by_id(salary_id)
        if not record:
            raise RecordNotFound("Salary record not found")
        return record

    def _save(self, record: SalaryRecord, **changes) -> SalaryRecord:
        updated = replace(record, **changes)
        self._salaries.update(
            salary_id=updated.salary_id,
            base_salary=updated.base_salary,
            deductions=updated.deductions,
            total_payable=updated.total_payable,
            status=updated.status,
            paid_date=updated.paid_date,
        )
        return updated
