from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.exceptions import ValidationError
from .numbers import to_decimal


def require_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None


def require_month(value: Any) -> int:
    month = require_int(value, "month")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return month


def require_year(value: Any) -> int:
    year = require_int(value, "year")
    if not 1970 <= year <= 9999:
        raise ValidationError("year is out of range")
    return year


def require_non_negative(value: Any, field_name: str) -> Decimal:
    if value is None:
        raise ValidationError(f"{field_name} is required")
    amount = to_decimal(value, field_name)
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount


def require_non_negative_int(value: Any, field_name: str) -> int:
    number = require_int(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_bool(value: Any, field_name: str) -> bool:
    # JSON booleans only; "false" or 0 are rejected rather than coerced.
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value
