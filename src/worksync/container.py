from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.dedup import DuplicateAttendanceCleaner
from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import Clock, SystemClock
from .core.constants import PAYROLL_DAYS_PER_MONTH
from .database.connection import DatabaseConnection, DBConfig
from .payroll.calculator.standard_calculator import StandardSalaryCalculator
from .payroll.mysql_salary_repository import MySQLSalaryRepository
from .payroll.repository import SalaryRepository
from .payroll.service import PayrollService
from .reports.service import AttendanceReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsProvider
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    settings_repo: SettingsRepository
    attendance_repo: AttendanceRepository
    salary_repo: SalaryRepository

    settings_provider: SettingsProvider
    attendance_service: AttendanceService
    payroll_service: PayrollService
    report_service: AttendanceReportService
    duplicate_cleaner: DuplicateAttendanceCleaner


def wire_container(
    *,
    users_repo: UserRepository,
    settings_repo: SettingsRepository,
    attendance_repo: AttendanceRepository,
    salary_repo: SalaryRepository,
    clock: Optional[Clock] = None,
    payroll_days_per_month: int = PAYROLL_DAYS_PER_MONTH,
    clamp_negative_absence: bool = True,
) -> Container:
    """Build services over any repository implementation (MySQL or in-memory)."""

    clock = clock or SystemClock()
    settings_provider = SettingsProvider(settings_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        users_repo,
        settings_provider,
        clock=clock,
        strategy_factory=AttendanceStrategyFactory(),
    )
    payroll_service = PayrollService(
        salary_repo,
        attendance_repo,
        users_repo,
        calculator=StandardSalaryCalculator(
            days_per_month=payroll_days_per_month,
            clamp_absence=clamp_negative_absence,
        ),
        clock=clock,
    )
    report_service = AttendanceReportService(attendance_repo, users_repo, clock=clock)

    return Container(
        users_repo=users_repo,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        salary_repo=salary_repo,
        settings_provider=settings_provider,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        report_service=report_service,
        duplicate_cleaner=DuplicateAttendanceCleaner(attendance_repo),
    )


def build_container(
    *,
    db_config: dict,
    clock: Optional[Clock] = None,
    payroll_days_per_month: int = PAYROLL_DAYS_PER_MONTH,
    clamp_negative_absence: bool = True,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return wire_container(
        users_repo=MySQLUserRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        salary_repo=MySQLSalaryRepository(conn),
        clock=clock,
        payroll_days_per_month=payroll_days_per_month,
        clamp_negative_absence=clamp_negative_absence,
    )
