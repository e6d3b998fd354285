"""Map absolute instants onto business-local calendar days."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..common.datetime_utils import date_key, is_aware
from ..core.constants import DEFAULT_UTC_OFFSET_MINUTES
from ..core.exceptions import InvalidConfiguration, ValidationError


@dataclass(frozen=True)
class TimezoneBucketer:
    """Buckets instants into "YYYY-MM-DD" keys under one business timezone.

    The timezone is expected to be a fixed offset (Asia/Dubai by default), so a
    later instant never maps to an earlier date key.
    """

    tz: tzinfo

    @classmethod
    def from_offset_minutes(cls, minutes: int = DEFAULT_UTC_OFFSET_MINUTES) -> "TimezoneBucketer":
        if not -14 * 60 <= int(minutes) <= 14 * 60:
            raise InvalidConfiguration(f"UTC offset out of range: {minutes} minutes")
        return cls(timezone(timedelta(minutes=int(minutes))))

    @classmethod
    def from_name(cls, tz_name: str) -> "TimezoneBucketer":
        """Create from an IANA timezone name like "Asia/Dubai"."""

        try:
            return cls(ZoneInfo(tz_name))
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidConfiguration(f"Unknown timezone {tz_name!r}") from exc

    def to_local(self, instant: datetime) -> datetime:
        if not is_aware(instant):
            raise ValidationError("Cannot bucket a naive datetime")
        return instant.astimezone(self.tz)

    def local_date(self, instant: datetime) -> date:
        return self.to_local(instant).date()

    def date_key(self, instant: datetime) -> str:
        return date_key(self.local_date(instant))

    def local_instant(self, d: date, t: time) -> datetime:
        return datetime.combine(d, t, tzinfo=self.tz)

    def day_bounds(self, d: date) -> tuple[datetime, datetime]:
        """[local midnight of d, local midnight of d + 1 day)."""

        return self.local_instant(d, time(0, 0)), self.local_instant(d + timedelta(days=1), time(0, 0))
