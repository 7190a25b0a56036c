from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...settings.model import WorkingHours
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Check-in after the grace window."""

    def decide_checkin(self, *, now: datetime, today: date, policy: Optional[WorkingHours]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
