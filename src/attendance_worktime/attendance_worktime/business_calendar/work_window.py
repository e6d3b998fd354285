"""Business-hours windows per local calendar day."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Mapping, Optional, Sequence

from ..common.datetime_utils import date_key as to_date_key
from ..common.datetime_utils import parse_hhmm, parse_iso_date, round_minutes
from ..core.constants import DEFAULT_WORK_HOURS, WEEKDAY_NAMES
from ..core.exceptions import InvalidConfiguration
from .bucketer import TimezoneBucketer

_MISSING = object()


@dataclass(frozen=True)
class WorkHoursRule:
    """Local [start, end) business hours for one weekday."""

    start: time
    end: time

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise InvalidConfiguration(f"Work hours end {self.end} must be after start {self.start}")

    @classmethod
    def parse(cls, value: Optional[Sequence[str]]) -> Optional["WorkHoursRule"]:
        if value is None:
            return None
        try:
            start_s, end_s = value
            return cls(start=parse_hhmm(start_s), end=parse_hhmm(end_s))
        except (TypeError, ValueError, AttributeError) as exc:
            raise InvalidConfiguration(f"Invalid work hours {value!r}, expected ('HH:MM', 'HH:MM')") from exc


@dataclass(frozen=True)
class WorkWindow:
    """Permitted work interval [start, end) of one local date."""

    date_key: str
    start: datetime
    end: datetime

    @property
    def length_minutes(self) -> int:
        return round_minutes(self.end - self.start)


class WorkWindowCache:
    """Per-date memo of resolved windows, owned by whoever runs the computation."""

    def __init__(self) -> None:
        self._windows: dict[str, Optional[WorkWindow]] = {}

    def lookup(self, key: str):
        return self._windows.get(key, _MISSING)

    def store(self, key: str, window: Optional[WorkWindow]) -> None:
        self._windows[key] = window

    def clear(self) -> None:
        self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)

    def __contains__(self, key: object) -> bool:
        return key in self._windows


class WorkWindowResolver:
    """Resolve a date key to its business-hours window, or None on a day off.

    The rule table must name all seven weekdays (0 = Monday ... 6 = Sunday,
    value None = day off). A gap would silently zero out a weekday's
    attendance, so it is refused at construction.
    """

    def __init__(self, bucketer: TimezoneBucketer, rules: Mapping[int, Optional[WorkHoursRule]]):
        missing = [WEEKDAY_NAMES[i] for i in range(7) if i not in rules]
        if missing:
            raise InvalidConfiguration(f"Work hours missing for weekday(s): {', '.join(missing)}")
        unknown = [k for k in rules if k not in range(7)]
        if unknown:
            raise InvalidConfiguration(f"Unknown weekday index(es) in work hours: {unknown}")

        self._bucketer = bucketer
        self._rules = {int(k): v for k, v in rules.items()}

    @classmethod
    def from_work_hours(
        cls,
        bucketer: TimezoneBucketer,
        work_hours: Optional[Mapping[str, Optional[Sequence[str]]]] = None,
    ) -> "WorkWindowResolver":
        """Build from a {"monday": ("10:00", "19:00"), ..., "sunday": None} table."""

        table = DEFAULT_WORK_HOURS if work_hours is None else work_hours
        normalized = {str(k).strip().lower(): v for k, v in table.items()}

        unknown = sorted(set(normalized) - set(WEEKDAY_NAMES))
        if unknown:
            raise InvalidConfiguration(f"Unknown weekday name(s) in work hours: {', '.join(unknown)}")

        rules = {
            idx: WorkHoursRule.parse(normalized[name])
            for idx, name in enumerate(WEEKDAY_NAMES)
            if name in normalized
        }
        return cls(bucketer, rules)

    @property
    def bucketer(self) -> TimezoneBucketer:
        return self._bucketer

    def weekday(self, key: "str | date") -> int:
        # Local noon keeps the weekday away from either midnight boundary.
        d = parse_iso_date(key) if isinstance(key, str) else key
        return self._bucketer.local_instant(d, time(12, 0)).weekday()

    def resolve(self, key: "str | date", cache: Optional[WorkWindowCache] = None) -> Optional[WorkWindow]:
        d = parse_iso_date(key) if isinstance(key, str) else key
        k = to_date_key(d)

        if cache is not None:
            hit = cache.lookup(k)
            if hit is not _MISSING:
                return hit

        rule = self._rules[self.weekday(d)]
        window = None
        if rule is not None:
            window = WorkWindow(
                date_key=k,
                start=self._bucketer.local_instant(d, rule.start),
                end=self._bucketer.local_instant(d, rule.end),
            )

        if cache is not None:
            cache.store(k, window)
        return window

    def window_minutes(self, key: "str | date", cache: Optional[WorkWindowCache] = None) -> int:
        window = self.resolve(key, cache)
        return window.length_minutes if window else 0
