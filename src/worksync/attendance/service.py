from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import Clock, SystemClock
from ..core.exceptions import (
    AlreadyCheckedIn,
    AlreadyCheckedOut,
    NotCheckedIn,
    UserNotFound,
    ValidationError,
)
from ..settings.service import SettingsProvider
from ..users.repository import UserRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord
from .repository import AttendanceRepository
from .worktime import elapsed_hours, overtime_hours, standard_shift_hours, worked_hours

logger = logging.getLogger(__name__)


class AttendanceService:
    """Records the one-per-day check-in/check-out of a user.

    NoRecord -> CheckedIn -> CheckedOut, where the business day is the date of
    the clock's "now".
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        settings: SettingsProvider,
        *,
        clock: Optional[Clock] = None,
        strategy_factory: Optional[AttendanceStrategyFactory] = None,
    ):
        self._attendance = attendance
        self._users = users
        self._settings = settings
        self._clock = clock or SystemClock()
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def check_in(self, user_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or self._clock.now()
        today = now.date()

        if not self._users.get_by_id(user_id):
            raise UserNotFound(f"User {user_id} not found")

        if self._attendance.get_for_user_and_date(user_id, today):
            raise AlreadyCheckedIn("You have already checked in today.")

        policy = self._settings.get_settings().working_hours
        strategy = self._factory.for_checkin(now=now, today=today, policy=policy)
        decision = strategy.decide_checkin(now=now, today=today, policy=policy)

        # The unique (user_id, work_date) key rejects a concurrent duplicate here.
        record = self._attendance.create_checkin(
            user_id=user_id,
            work_date=today,
            check_in_time=now,
            status=decision.status,
        )
        logger.info("user %s checked in on %s as %s", user_id, today, decision.status.value)
        return record

    def check_out(self, user_id: int, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or self._clock.now()
        today = now.date()

        record = self._attendance.get_for_user_and_date(user_id, today)
        if not record or record.check_in_time is None:
            raise NotCheckedIn("You have not checked in today.")
        if record.check_out_time is not None:
            raise AlreadyCheckedOut("You have already checked out today.")
        if now < record.check_in_time:
            raise ValidationError("Check-out time cannot be earlier than check-in time")

        policy = self._settings.get_settings().working_hours
        standard = standard_shift_hours(policy)
        hours = worked_hours(record.check_in_time, now)
        overtime = overtime_hours(elapsed_hours(record.check_in_time, now), standard)
        decision = self._factory.for_checkout().decide_checkout(now=now, current=record.status)

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            working_hours=hours,
            overtime_hours=overtime,
        )
        if not updated:
            # Lost a race with another check-out for the same record.
            raise AlreadyCheckedOut("You have already checked out today.")

        logger.info("user %s checked out on %s after %s h (overtime %s h)", user_id, today, hours, overtime)
        return replace(
            record,
            check_out_time=now,
            working_hours=hours,
            overtime_hours=overtime,
            status=decision.status,
        )

    def get_today_record(self, user_id: int) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_user_and_date(user_id, self._clock.now().date())
