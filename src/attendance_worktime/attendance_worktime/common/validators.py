from __future__ import annotations

from datetime import datetime

from ..core.enums import Period
from ..core.exceptions import ValidationError
from .datetime_utils import is_aware


def require_period(value: "Period | str") -> Period:
    if isinstance(value, Period):
        return value
    try:
        return Period(str(value).strip().lower())
    except ValueError as exc:
        raise ValidationError(f"Unknown period {value!r}, expected day, week or month") from exc


def require_aware(value: datetime, field_name: str) -> datetime:
    if not isinstance(value, datetime) or not is_aware(value):
        raise ValidationError(f"{field_name} must be a timezone-aware datetime")
    return value
