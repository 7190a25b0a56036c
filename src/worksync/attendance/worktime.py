"""Hours arithmetic for check-out: worked duration, shift length, overtime."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..common.numbers import round2
from ..core.constants import DEFAULT_STANDARD_SHIFT_HOURS
from ..settings.model import WorkingHours

_SECONDS_PER_HOUR = Decimal(3600)


def elapsed_hours(check_in: datetime, check_out: datetime) -> Decimal:
    """Unrounded hours between two instants."""
    seconds = Decimal(str((check_out - check_in).total_seconds()))
    return seconds / _SECONDS_PER_HOUR


def worked_hours(check_in: datetime, check_out: datetime) -> Decimal:
    return round2(elapsed_hours(check_in, check_out))


def shift_length_hours(policy: Optional[WorkingHours]) -> Optional[Decimal]:
    """Configured shift length; overnight shifts wrap by +24h.

    Returns None when either end of the shift is not configured.
    """

    if policy is None:
        return None
    start = policy.check_in_time()
    end = policy.check_out_time()
    if start is None or end is None:
        return None

    shift_start = Decimal(start.hour) + Decimal(start.minute) / 60
    shift_end = Decimal(end.hour) + Decimal(end.minute) / 60
    length = shift_end - shift_start
    if length < 0:
        length += 24
    return length


def standard_shift_hours(policy: Optional[WorkingHours]) -> Decimal:
    length = shift_length_hours(policy)
    if length is None or length <= 0:
        return Decimal(DEFAULT_STANDARD_SHIFT_HOURS)
    return length


def overtime_hours(hours: Decimal, standard: Decimal) -> Decimal:
    if hours > standard:
        return round2(hours - standard)
    return Decimal("0")
