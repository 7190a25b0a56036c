from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..settings.model import WorkingHours
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


def late_limit(today: date, policy: WorkingHours) -> Optional[datetime]:
    """Last instant of `today` that still counts as on time, or None without a policy."""

    start = policy.check_in_time()
    if start is None:
        return None
    return datetime.combine(today, start) + timedelta(minutes=int(policy.grace_period or 0))


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules.

    Arriving exactly at the limit is on time; only `now > limit` is late.
    """

    def for_checkin(self, *, now: datetime, today: date, policy: Optional[WorkingHours]) -> AttendanceStrategy:
        if policy is None:
            return PresentStrategy()

        limit = late_limit(today, policy)
        if limit is None or now <= limit:
            return PresentStrategy()
        return LateStrategy()

    def for_checkout(self) -> AttendanceStrategy:
        return PresentStrategy()
