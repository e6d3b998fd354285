from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError) as exc:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from exc


def parse_hhmm(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def date_key(d: date) -> str:
    return d.strftime("%Y-%m-%d")


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None


def round_minutes(delta: timedelta) -> int:
    """Whole minutes, half rounded up (12:30.5 -> 13)."""
    return int(math.floor(delta.total_seconds() / 60.0 + 0.5))


def seconds_since_midnight(value: datetime) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def time_from_seconds(seconds: float) -> time:
    s = int(round(seconds)) % 86400
    return time(hour=s // 3600, minute=(s % 3600) // 60, second=s % 60)


def format_hhmm(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
