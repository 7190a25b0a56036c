from __future__ import annotations

import logging
from dataclasses import replace

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_bool, require_non_negative_int
from ..core.constants import WEEKDAY_NAMES
from ..core.exceptions import AuthorizationError, DuplicateRecordError, ValidationError
from ..users.model import Actor
from .model import CompanySettings, SettingsUpdate
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsProvider:
    """Supplies the singleton CompanySettings, seeding defaults on first read.

    Settings are read from storage on every call, so an update is visible to
    the next operation without any cache invalidation.
    """

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get_settings(self) -> CompanySettings:
        current = self._settings.get()
        if current is not None:
            return current

        defaults = CompanySettings()
        try:
            self._settings.create(defaults)
            logger.info("company settings seeded with defaults")
        except DuplicateRecordError:
            # Another request created the singleton first.
            current = self._settings.get()
            if current is not None:
                return current
            raise
        return defaults

    def update_settings(self, update: SettingsUpdate, *, actor: Actor) -> CompanySettings:
        if not actor.is_privileged:
            raise AuthorizationError("Not authorized to update settings")

        current = self.get_settings()
        hours = current.working_hours
        quotas = current.leave_quotas

        if update.check_in is not None:
            hours = replace(hours, check_in=_normalize_hhmm(update.check_in))
        if update.check_out is not None:
            hours = replace(hours, check_out=_normalize_hhmm(update.check_out))
        if update.grace_period is not None:
            hours = replace(hours, grace_period=require_non_negative_int(update.grace_period, "gracePeriod"))

        quota_fields = {
            "annual": update.annual_leave,
            "sick": update.sick_leave,
            "casual": update.casual_leave,
            "maternity": update.maternity_leave,
        }
        for name, value in quota_fields.items():
            if value is not None:
                quotas = replace(quotas, **{name: require_non_negative_int(value, f"leaveQuotas.{name}")})

        weekend = current.weekend_policy
        if update.weekend_policy is not None:
            weekend = _normalize_weekend(update.weekend_policy)

        updated = CompanySettings(
            working_hours=hours,
            weekend_policy=weekend,
            leave_quotas=quotas,
            leave_approval_required=(
                require_bool(update.leave_approval_required, "leaveApprovalRequired")
                if update.leave_approval_required is not None
                else current.leave_approval_required
            ),
            email_notifications=(
                require_bool(update.email_notifications, "emailNotifications")
                if update.email_notifications is not None
                else current.email_notifications
            ),
        )
        self._settings.save(updated)
        logger.info("company settings updated by user %s", actor.user_id)
        return updated


def _normalize_hhmm(value: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"Invalid time: {value!r}, expected HH:MM")
    return parse_hhmm(value).strftime("%H:%M")


def _normalize_weekend(days: tuple[str, ...]) -> tuple[str, ...]:
    for day in days:
        if day not in WEEKDAY_NAMES:
            raise ValidationError(f"Unknown weekday: {day!r}")
    # Keep calendar order, drop repeats.
    return tuple(d for d in WEEKDAY_NAMES if d in set(days))
