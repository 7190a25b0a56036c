from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Collection, Optional

from worksync.attendance.model import AttendanceLogRow, AttendanceRecord, DuplicateGroup
from worksync.core.enums import AttendanceStatus, Role, SalaryStatus, SalaryType, UserStatus
from worksync.core.exceptions import DuplicateRecordError
from worksync.payroll.model import SalaryListRow, SalaryRecord
from worksync.settings.model import CompanySettings
from worksync.users.model import User


class FixedClock:
    def __init__(self, now: datetime):
        self.current = now

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class InMemoryUsers:
    def __init__(self, users: list[User] | None = None):
        self.users_by_id: dict[int, User] = {u.user_id: u for u in users or []}

    def add(self, user: User) -> User:
        self.users_by_id[user.user_id] = user
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.users_by_id.get(int(user_id))

    def list_by_role(self, role: Role, *, active_only: bool = False):
        return [
            u for u in sorted(self.users_by_id.values(), key=lambda u: u.user_id)
            if u.role == role and (u.is_active or not active_only)
        ]

    def count_by_role(self, role: Role, *, active_only: bool = False) -> int:
        return len(self.list_by_role(role, active_only=active_only))


class InMemorySettings:
    def __init__(self, settings: CompanySettings | None = None):
        self.settings = settings
        self.creates = 0

    def get(self) -> Optional[CompanySettings]:
        return self.settings

    def create(self, settings: CompanySettings) -> None:
        if self.settings is not None:
            raise DuplicateRecordError("company_settings already exists")
        self.creates += 1
        self.settings = settings

    def save(self, settings: CompanySettings) -> None:
        self.settings = settings


class InMemoryAttendance:
    """Mimics the table, including the unique (user_id, work_date) key."""

    def __init__(self, users: InMemoryUsers | None = None):
        self.records: dict[int, AttendanceRecord] = {}
        self._users = users
        self._id = 0

    def _next_id(self) -> int:
        self._id += 1
        return self._id

    def insert_raw(self, record: AttendanceRecord) -> AttendanceRecord:
        """Bypass the unique key, as legacy data without the index did."""
        rec = replace(record, attendance_id=self._next_id())
        self.records[rec.attendance_id] = rec
        return rec

    def _find(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for rec in self.records.values():
            if rec.user_id == int(user_id) and rec.work_date == work_date:
                return rec
        return None

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._find(user_id, work_date)

    def list_for_user_between(self, user_id: int, start_date: date, end_date: date):
        items = [
            r for r in self.records.values()
            if r.user_id == int(user_id) and start_date <= r.work_date <= end_date
        ]
        return sorted(items, key=lambda r: r.work_date)

    def count_for_user_between(self, user_id: int, start_date: date, end_date: date, *, statuses: Collection[AttendanceStatus]) -> int:
        return len([r for r in self.list_for_user_between(user_id, start_date, end_date) if r.status in statuses])

    def count_on_date(self, work_date: date, *, status: AttendanceStatus) -> int:
        return len([r for r in self.records.values() if r.work_date == work_date and r.status == status])

    def list_logs(self, *, start_date=None, end_date=None, status=None):
        rows = []
        for r in self.records.values():
            if start_date is not None and r.work_date < start_date:
                continue
            if end_date is not None and r.work_date > end_date:
                continue
            if status is not None and r.status != status:
                continue
            user = self._users.get_by_id(r.user_id) if self._users else None
            rows.append(
                AttendanceLogRow(
                    record=r,
                    user_name=user.name if user else "",
                    user_email=user.email if user else "",
                    designation=user.designation if user else None,
                )
            )
        rows.sort(key=lambda row: (-row.record.work_date.toordinal(), row.record.user_id))
        return rows

    def create_checkin(self, *, user_id: int, work_date: date, check_in_time: datetime, status: AttendanceStatus) -> AttendanceRecord:
        # The unique key is checked against storage, not through the public lookup.
        if self._find(user_id, work_date):
            raise DuplicateRecordError(f"Duplicate entry '{user_id}-{work_date}' for key 'uq_attendance_user_date'")
        return self.insert_raw(
            AttendanceRecord(
                attendance_id=0,
                user_id=int(user_id),
                work_date=work_date,
                check_in_time=check_in_time,
                check_out_time=None,
                status=status,
                created_at=check_in_time,
            )
        )

    def update_checkout(self, *, attendance_id: int, check_out_time: datetime, working_hours: Decimal, overtime_hours: Decimal) -> bool:
        rec = self.records.get(int(attendance_id))
        if not rec or rec.check_out_time is not None:
            return False
        self.records[rec.attendance_id] = replace(
            rec,
            check_out_time=check_out_time,
            working_hours=working_hours,
            overtime_hours=overtime_hours,
        )
        return True

    def find_duplicate_groups(self):
        grouped: dict[tuple[int, date], list[AttendanceRecord]] = {}
        for rec in self.records.values():
            grouped.setdefault((rec.user_id, rec.work_date), []).append(rec)

        groups = []
        for (user_id, work_date), recs in sorted(grouped.items()):
            if len(recs) < 2:
                continue
            recs.sort(key=lambda r: (r.created_at or datetime.min, r.attendance_id))
            groups.append(DuplicateGroup(user_id=user_id, work_date=work_date, attendance_ids=tuple(r.attendance_id for r in recs)))
        return groups

    def delete_by_ids(self, attendance_ids: Collection[int]) -> int:
        removed = 0
        for attendance_id in attendance_ids:
            if self.records.pop(int(attendance_id), None) is not None:
                removed += 1
        return removed


class InMemorySalaries:
    """Mimics the table, including the unique (user_id, salary_month) key."""

    def __init__(self, users: InMemoryUsers | None = None):
        self.records: dict[int, SalaryRecord] = {}
        self._users = users
        self._id = 0

    def get_by_id(self, salary_id: int) -> Optional[SalaryRecord]:
        return self.records.get(int(salary_id))

    def get_for_user_and_month(self, user_id: int, month: str) -> Optional[SalaryRecord]:
        for rec in self.records.values():
            if rec.user_id == int(user_id) and rec.month == month:
                return rec
        return None

    def list_for_user(self, user_id: int):
        return [r for r in self.records.values() if r.user_id == int(user_id)]

    def list_all(self):
        rows = []
        for rec in self.records.values():
            user = self._users.get_by_id(rec.user_id) if self._users else None
            rows.append(SalaryListRow(record=rec, employee_name=user.name if user else None))
        return rows

    def create(self, *, user_id: int, month: str, base_salary: Decimal, deductions: Decimal, total_payable: Decimal) -> SalaryRecord:
        if self.get_for_user_and_month(user_id, month):
            raise DuplicateRecordError(f"Duplicate entry '{user_id}-{month}' for key 'uq_salary_user_month'")
        self._id += 1
        rec = SalaryRecord(
            salary_id=self._id,
            user_id=int(user_id),
            month=month,
            base_salary=base_salary,
            deductions=deductions,
            total_payable=total_payable,
        )
        self.records[rec.salary_id] = rec
        return rec

    def update(self, *, salary_id: int, base_salary: Decimal, deductions: Decimal, total_payable: Decimal, status: SalaryStatus, paid_date) -> None:
        rec = self.records[int(salary_id)]
        self.records[rec.salary_id] = replace(
            rec,
            base_salary=base_salary,
            deductions=deductions,
            total_payable=total_payable,
            status=status,
            paid_date=paid_date,
        )


def make_user(
    user_id: int,
    *,
    role: Role = Role.EMPLOYEE,
    salary: str | None = "30000",
    salary_type: SalaryType = SalaryType.MONTHLY,
    status: UserStatus = UserStatus.ACTIVE,
) -> User:
    return User(
        user_id=user_id,
        name=f"User {user_id}",
        email=f"user{user_id}@example.com",
        role=role,
        status=status,
        salary=Decimal(salary) if salary is not None else None,
        salary_type=salary_type,
    )
