from __future__ import annotations

from datetime import datetime

import pytest

from worksync.container import wire_container
from worksync.core.enums import Role, SalaryType
from worksync.settings.model import CompanySettings, WorkingHours

from fakes import FixedClock, InMemoryAttendance, InMemorySalaries, InMemorySettings, InMemoryUsers, make_user


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 11, 9, 0, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def office_settings() -> CompanySettings:
    return CompanySettings(
        working_hours=WorkingHours(check_in="09:00", check_out="18:00", grace_period=15),
        weekend_policy=("Sat", "Sun"),
    )


@pytest.fixture
def users() -> InMemoryUsers:
    return InMemoryUsers(
        [
            make_user(1),
            make_user(2, salary="480000", salary_type=SalaryType.ANNUAL),
            make_user(9, role=Role.ADMIN, salary=None),
        ]
    )


@pytest.fixture
def settings_repo(office_settings) -> InMemorySettings:
    return InMemorySettings(office_settings)


@pytest.fixture
def attendance_repo(users) -> InMemoryAttendance:
    return InMemoryAttendance(users)


@pytest.fixture
def salary_repo(users) -> InMemorySalaries:
    return InMemorySalaries(users)


@pytest.fixture
def container(users, settings_repo, attendance_repo, salary_repo, clock):
    return wire_container(
        users_repo=users,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        salary_repo=salary_repo,
        clock=clock,
    )
