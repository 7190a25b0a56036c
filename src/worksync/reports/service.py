from __future__ import annotations

from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.model import AttendanceLogRow, AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import Clock, SystemClock, month_token, month_window
from ..common.validators import require_month, require_year
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..users.model import Actor
from ..users.repository import UserRepository
from .model import AttendanceSummary, MonthlyTotals


def parse_status_filter(value: Optional[str]) -> Optional[AttendanceStatus]:
    """`None`, empty or "All" mean no filter; otherwise a case-insensitive status."""

    if value is None or not value.strip() or value.strip().lower() == "all":
        return None
    try:
        return AttendanceStatus(value.strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}") from None


class AttendanceReportService:
    """Read-only projections over attendance records."""

    def __init__(self, attendance: AttendanceRepository, users: UserRepository, *, clock: Optional[Clock] = None):
        self._attendance = attendance
        self._users = users
        self._clock = clock or SystemClock()

    def get_daily(self, user_id: int, *, actor: Actor, day: Optional[date] = None) -> Optional[AttendanceRecord]:
        self._ensure_can_view(actor, user_id)
        return self._attendance.get_for_user_and_date(user_id, day or self._clock.now().date())

    def get_monthly(self, user_id: int, month: int, year: int, *, actor: Actor) -> Sequence[AttendanceRecord]:
        self._ensure_can_view(actor, user_id)
        start, end = month_window(require_year(year), require_month(month))
        return self._attendance.list_for_user_between(user_id, start, end)

    def monthly_totals(self, user_id: int, month: int, year: int, *, actor: Actor) -> MonthlyTotals:
        records = self.get_monthly(user_id, month, year, actor=actor)

        by_status = Counter(r.status for r in records)
        return MonthlyTotals(
            user_id=int(user_id),
            month=month_token(year, month),
            present=by_status[AttendanceStatus.PRESENT],
            late=by_status[AttendanceStatus.LATE],
            leave=by_status[AttendanceStatus.LEAVE],
            absent=by_status[AttendanceStatus.ABSENT],
            working_hours=sum((r.working_hours for r in records), Decimal("0")),
            overtime_hours=sum((r.overtime_hours for r in records), Decimal("0")),
        )

    def list_logs(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        status: Optional[str] = None,
    ) -> Sequence[AttendanceLogRow]:
        if start and end and end < start:
            raise ValidationError("endDate must not be before startDate")
        return self._attendance.list_logs(start_date=start, end_date=end, status=parse_status_filter(status))

    def summary(self, *, day: Optional[date] = None) -> AttendanceSummary:
        day = day or self._clock.now().date()
        total = self._users.count_by_role(Role.EMPLOYEE, active_only=True)
        present = self._attendance.count_on_date(day, status=AttendanceStatus.PRESENT)
        return AttendanceSummary(date=day, total_employees=total, present=present, absent=total - present)

    def _ensure_can_view(self, actor: Actor, user_id: int) -> None:
        if not actor.is_privileged and actor.user_id != int(user_id):
            raise AuthorizationError("Not authorized to view this attendance")
