from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles as supplied by the identity collaborator."""

    ADMIN = "admin"
    SUB_ADMIN = "sub-admin"
    EMPLOYEE = "employee"

    @property
    def is_privileged(self) -> bool:
        return self in (Role.ADMIN, Role.SUB_ADMIN)


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Attendance status stored per (user, day)."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"


# Statuses counted as paid days by payroll.
PAID_ATTENDANCE_STATUSES = (AttendanceStatus.PRESENT, AttendanceStatus.LEAVE)


class SalaryType(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"


class SalaryStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"
