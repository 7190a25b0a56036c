from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class AttendanceSummary:
    date: date
    total_employees: int
    present: int
    absent: int

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "totalEmployees": self.total_employees,
            "present": self.present,
            "absent": self.absent,
        }


@dataclass(frozen=True)
class MonthlyTotals:
    user_id: int
    month: str
    present: int
    late: int
    leave: int
    absent: int
    working_hours: Decimal
    overtime_hours: Decimal

    def to_dict(self) -> dict:
        return {
            "user": self.user_id,
            "month": self.month,
            "present": self.present,
            "late": self.late,
            "leave": self.leave,
            "absent": self.absent,
            "workingHours": float(self.working_hours),
            "overtimeHours": float(self.overtime_hours),
        }
