from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance record per (user, work_date)."""

    attendance_id: int
    user_id: int
    work_date: date
    check_in_time: Optional[datetime]
    check_out_time: Optional[datetime]
    status: AttendanceStatus = AttendanceStatus.ABSENT
    working_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "user": self.user_id,
            "date": self.work_date.isoformat(),
            "checkIn": self.check_in_time.isoformat() if self.check_in_time else None,
            "checkOut": self.check_out_time.isoformat() if self.check_out_time else None,
            "workingHours": float(self.working_hours),
            "overtimeHours": float(self.overtime_hours),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceLogRow:
    """Read-model for the admin log view (record joined with the employee)."""

    record: AttendanceRecord
    user_name: str
    user_email: str
    designation: Optional[str] = None

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        data["user"] = {
            "id": self.record.user_id,
            "name": self.user_name,
            "email": self.user_email,
            "designation": self.designation,
        }
        return data


@dataclass(frozen=True)
class DuplicateGroup:
    """Records sharing one (user, work_date), ordered oldest first."""

    user_id: int
    work_date: date
    attendance_ids: tuple[int, ...]
