"""Engine settings.

Settings modules (config.development, config.production, ...) expose plain
upper-case attributes; load_engine_settings turns one into a validated
EngineSettings. Anything that would silently zero out attendance raises
InvalidConfiguration here, at startup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from types import ModuleType
from typing import AbstractSet, Any, Mapping, Optional, Sequence

from ..business_calendar.bucketer import TimezoneBucketer
from ..business_calendar.work_window import WorkWindowResolver
from ..common.datetime_utils import parse_iso_date
from .constants import (
    DEFAULT_DATA_START_DATE,
    DEFAULT_FALLBACK_MAX_MINUTES,
    DEFAULT_UTC_OFFSET_MINUTES,
    DEFAULT_WORK_ACTIVITY_KINDS,
    DEFAULT_WORK_HOURS,
)
from .exceptions import InvalidConfiguration, ValidationError


@dataclass(frozen=True)
class EngineSettings:
    utc_offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES
    timezone_name: Optional[str] = None
    work_hours: Mapping[str, Optional[Sequence[str]]] = field(default_factory=lambda: dict(DEFAULT_WORK_HOURS))
    data_start_date: Optional[date] = DEFAULT_DATA_START_DATE
    fallback_max_minutes: int = DEFAULT_FALLBACK_MAX_MINUTES
    work_activity_kinds: AbstractSet[str] = DEFAULT_WORK_ACTIVITY_KINDS
    ongoing_span_cap_minutes: Optional[int] = None

    def __post_init__(self) -> None:
        if int(self.fallback_max_minutes) <= 0:
            raise InvalidConfiguration("FALLBACK_MAX_MINUTES must be positive")
        if self.ongoing_span_cap_minutes is not None and int(self.ongoing_span_cap_minutes) <= 0:
            raise InvalidConfiguration("ONGOING_SPAN_CAP_MINUTES must be positive when set")
        if not self.work_activity_kinds:
            raise InvalidConfiguration("WORK_ACTIVITY_KINDS must not be empty")
        # Fail fast on a broken timezone or rule table.
        self.build_resolver()

    @property
    def ongoing_cap(self) -> Optional[timedelta]:
        if self.ongoing_span_cap_minutes is None:
            return None
        return timedelta(minutes=int(self.ongoing_span_cap_minutes))

    def build_bucketer(self) -> TimezoneBucketer:
        if self.timezone_name:
            return TimezoneBucketer.from_name(self.timezone_name)
        return TimezoneBucketer.from_offset_minutes(self.utc_offset_minutes)

    def build_resolver(self) -> WorkWindowResolver:
        return WorkWindowResolver.from_work_hours(self.build_bucketer(), self.work_hours)


def _as_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value))
    except ValidationError as exc:
        raise InvalidConfiguration(f"DATA_START_DATE invalid: {value!r}") from exc


def _as_optional_int(value: Any, name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}") from exc


def load_engine_settings(settings: ModuleType) -> EngineSettings:
    """Build EngineSettings from a settings module (see config/)."""

    offset = _as_optional_int(getattr(settings, "BUSINESS_UTC_OFFSET_MINUTES", None), "BUSINESS_UTC_OFFSET_MINUTES")
    fallback_max = _as_optional_int(getattr(settings, "FALLBACK_MAX_MINUTES", None), "FALLBACK_MAX_MINUTES")
    cap = _as_optional_int(getattr(settings, "ONGOING_SPAN_CAP_MINUTES", None), "ONGOING_SPAN_CAP_MINUTES")

    kinds = getattr(settings, "WORK_ACTIVITY_KINDS", None)
    if isinstance(kinds, str):
        kinds = [k.strip() for k in kinds.split(",") if k.strip()]

    return EngineSettings(
        utc_offset_minutes=DEFAULT_UTC_OFFSET_MINUTES if offset is None else offset,
        timezone_name=getattr(settings, "BUSINESS_TIMEZONE", None) or None,
        work_hours=getattr(settings, "WORK_HOURS", DEFAULT_WORK_HOURS),
        data_start_date=_as_date(getattr(settings, "DATA_START_DATE", DEFAULT_DATA_START_DATE)),
        fallback_max_minutes=DEFAULT_FALLBACK_MAX_MINUTES if fallback_max is None else fallback_max,
        work_activity_kinds=DEFAULT_WORK_ACTIVITY_KINDS if kinds is None else frozenset(kinds),
        ongoing_span_cap_minutes=cap,
    )
