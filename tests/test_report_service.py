from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from worksync.attendance.model import AttendanceRecord
from worksync.core.enums import AttendanceStatus, Role, UserStatus
from worksync.core.exceptions import AuthorizationError, ValidationError
from worksync.reports.service import AttendanceReportService, parse_status_filter
from worksync.users.model import Actor

from fakes import make_user

ADMIN = Actor(user_id=9, role=Role.ADMIN)


def _record(user_id: int, day: date, status: AttendanceStatus, hours: str = "0", overtime: str = "0") -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=0,
        user_id=user_id,
        work_date=day,
        check_in_time=datetime.combine(day, datetime.min.time()),
        check_out_time=None,
        status=status,
        working_hours=Decimal(hours),
        overtime_hours=Decimal(overtime),
    )


@pytest.fixture
def reports(attendance_repo, users, clock) -> AttendanceReportService:
    return AttendanceReportService(attendance_repo, users, clock=clock)


def test_summary_counts_active_employees_and_present_today(reports, attendance_repo, users, clock):
    users.add(make_user(3, status=UserStatus.INACTIVE))
    today = clock.now().date()
    attendance_repo.insert_raw(_record(1, today, AttendanceStatus.PRESENT))
    attendance_repo.insert_raw(_record(2, today, AttendanceStatus.LATE))
    attendance_repo.insert_raw(_record(1, date(2024, 3, 10), AttendanceStatus.PRESENT))

    summary = reports.summary()

    assert summary.date == today
    assert summary.total_employees == 2
    assert summary.present == 1
    assert summary.absent == 1


def test_daily_and_monthly_views(reports, attendance_repo, clock):
    today = clock.now().date()
    attendance_repo.insert_raw(_record(1, today, AttendanceStatus.PRESENT))
    attendance_repo.insert_raw(_record(1, date(2024, 3, 1), AttendanceStatus.LATE))
    attendance_repo.insert_raw(_record(1, date(2024, 4, 1), AttendanceStatus.PRESENT))
    me = Actor(user_id=1, role=Role.EMPLOYEE)

    assert reports.get_daily(1, actor=me).work_date == today
    assert reports.get_daily(2, actor=ADMIN) is None
    assert [r.work_date for r in reports.get_monthly(1, 3, 2024, actor=me)] == [date(2024, 3, 1), today]


def test_employee_cannot_read_other_users_attendance(reports):
    with pytest.raises(AuthorizationError):
        reports.get_daily(2, actor=Actor(user_id=1, role=Role.EMPLOYEE))


def test_monthly_totals(reports, attendance_repo):
    attendance_repo.insert_raw(_record(1, date(2024, 3, 4), AttendanceStatus.PRESENT, "9.50", "0.50"))
    attendance_repo.insert_raw(_record(1, date(2024, 3, 5), AttendanceStatus.LATE, "8.00"))
    attendance_repo.insert_raw(_record(1, date(2024, 3, 6), AttendanceStatus.LEAVE))

    totals = reports.monthly_totals(1, 3, 2024, actor=ADMIN)

    assert (totals.present, totals.late, totals.leave, totals.absent) == (1, 1, 1, 0)
    assert totals.working_hours == Decimal("17.50")
    assert totals.overtime_hours == Decimal("0.50")
    assert totals.month == "2024-3"


def test_logs_filter_by_range_and_status(reports, attendance_repo):
    attendance_repo.insert_raw(_record(1, date(2024, 3, 4), AttendanceStatus.PRESENT))
    attendance_repo.insert_raw(_record(2, date(2024, 3, 4), AttendanceStatus.LATE))
    attendance_repo.insert_raw(_record(1, date(2024, 3, 9), AttendanceStatus.LATE))

    late = reports.list_logs(start=date(2024, 3, 1), end=date(2024, 3, 5), status="Late")
    everything = reports.list_logs(status="All")

    assert [(r.record.user_id, r.record.work_date) for r in late] == [(2, date(2024, 3, 4))]
    assert late[0].to_dict()["user"]["name"] == "User 2"
    assert [r.record.work_date for r in everything] == [date(2024, 3, 9), date(2024, 3, 4), date(2024, 3, 4)]


def test_logs_reject_inverted_range(reports):
    with pytest.raises(ValidationError):
        reports.list_logs(start=date(2024, 3, 5), end=date(2024, 3, 1))


def test_status_filter_parsing():
    assert parse_status_filter(None) is None
    assert parse_status_filter("All") is None
    assert parse_status_filter("PRESENT") == AttendanceStatus.PRESENT
    with pytest.raises(ValidationError):
        parse_status_filter("holiday")
