from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Collection, Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceLogRow, AttendanceRecord, DuplicateGroup


class AttendanceRepository(Protocol):
    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_user_between(self, user_id: int, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_for_user_between(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
        *,
        statuses: Collection[AttendanceStatus],
    ) -> int:
        raise NotImplementedError

    def count_on_date(self, work_date: date, *, status: AttendanceStatus) -> int:
        raise NotImplementedError

    def list_logs(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        status: Optional[AttendanceStatus] = None,
    ) -> Sequence[AttendanceLogRow]:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        user_id: int,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        """Insert the day's record; raises DuplicateRecordError if (user, date) exists."""

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        working_hours: Decimal,
        overtime_hours: Decimal,
    ) -> bool:
        raise NotImplementedError

    def find_duplicate_groups(self) -> Sequence[DuplicateGroup]:
        raise NotImplementedError

    def delete_by_ids(self, attendance_ids: Collection[int]) -> int:
        raise NotImplementedError
