from __future__ import annotations

from dataclasses import dataclass, field
from datetime import time
from typing import Optional

from ..common.datetime_utils import parse_hhmm
from ..common.validators import require_bool
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkingHours:
    """Standard shift policy. Times are "HH:MM"; None means not configured."""

    check_in: Optional[str] = None
    check_out: Optional[str] = None
    grace_period: int = 0

    def check_in_time(self) -> Optional[time]:
        return parse_hhmm(self.check_in) if self.check_in else None

    def check_out_time(self) -> Optional[time]:
        return parse_hhmm(self.check_out) if self.check_out else None


@dataclass(frozen=True)
class LeaveQuotas:
    annual: int = 0
    sick: int = 0
    casual: int = 0
    maternity: int = 0


@dataclass(frozen=True)
class CompanySettings:
    """The single global policy configuration."""

    working_hours: WorkingHours = field(default_factory=WorkingHours)
    weekend_policy: tuple[str, ...] = ()
    leave_quotas: LeaveQuotas = field(default_factory=LeaveQuotas)
    leave_approval_required: bool = False
    email_notifications: bool = False

    def to_dict(self) -> dict:
        return {
            "workingHours": {
                "checkIn": self.working_hours.check_in,
                "checkOut": self.working_hours.check_out,
                "gracePeriod": self.working_hours.grace_period,
            },
            "weekendPolicy": list(self.weekend_policy),
            "leaveQuotas": {
                "annual": self.leave_quotas.annual,
                "sick": self.leave_quotas.sick,
                "casual": self.leave_quotas.casual,
                "maternity": self.leave_quotas.maternity,
            },
            "leaveApprovalRequired": self.leave_approval_required,
            "emailNotifications": self.email_notifications,
        }


@dataclass(frozen=True)
class SettingsUpdate:
    """Typed input for a settings update; None fields are left unchanged."""

    check_in: Optional[str] = None
    check_out: Optional[str] = None
    grace_period: Optional[int] = None
    weekend_policy: Optional[tuple[str, ...]] = None
    annual_leave: Optional[int] = None
    sick_leave: Optional[int] = None
    casual_leave: Optional[int] = None
    maternity_leave: Optional[int] = None
    leave_approval_required: Optional[bool] = None
    email_notifications: Optional[bool] = None

    @classmethod
    def from_payload(cls, data: dict) -> "SettingsUpdate":
        """Build from the JSON body used by the dashboards."""

        hours = _section(data, "workingHours", dict) or {}
        quotas = _section(data, "leaveQuotas", dict) or {}
        weekend = _section(data, "weekendPolicy", list)
        return cls(
            check_in=hours.get("checkIn"),
            check_out=hours.get("checkOut"),
            grace_period=hours.get("gracePeriod"),
            weekend_policy=tuple(weekend) if weekend is not None else None,
            annual_leave=quotas.get("annual"),
            sick_leave=quotas.get("sick"),
            casual_leave=quotas.get("casual"),
            maternity_leave=quotas.get("maternity"),
            leave_approval_required=_optional_bool(data, "leaveApprovalRequired"),
            email_notifications=_optional_bool(data, "emailNotifications"),
        )


def _section(data: dict, key: str, kind: type):
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        expected = "an object" if kind is dict else "a list"
        raise ValidationError(f"{key} must be {expected}")
    return value


def _optional_bool(data: dict, key: str) -> Optional[bool]:
    value = data.get(key)
    return require_bool(value, key) if value is not None else None
