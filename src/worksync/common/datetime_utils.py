from __future__ import annotations

import calendar
from datetime import date, datetime, time, tzinfo
from typing import Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}, expected YYYY-MM-DD") from None


def parse_hhmm(value: str) -> time:
    """Parse an "HH:MM" policy time."""
    try:
        hours, minutes = (int(part) for part in value.strip().split(":"))
        return time(hour=hours, minute=minutes)
    except (AttributeError, TypeError, ValueError):
        raise ValidationError(f"Invalid time: {value!r}, expected HH:MM") from None


def month_window(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of (year, month)."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_token(year: int, month: int) -> str:
    """Salary month key, e.g. 2024-3 (month is not zero padded)."""
    return f"{int(year)}-{int(month)}"


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except ZoneInfoNotFoundError:
        raise ValidationError(f"Unknown timezone: {name!r}") from None


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Wall clock.

    With a timezone, "now" (and so the business day) is read in that zone and
    returned naive, matching the naive DATETIME columns. Without one, the
    server's local time is used.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        self._tz = tz

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now()
        return datetime.now(self._tz).replace(tzinfo=None)
