from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time, timedelta
from typing import Iterator, Optional

from ..common.datetime_utils import date_key


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of business-local dates."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"DateRange end {self.end} before start {self.start}")

    def days(self) -> Iterator[date]:
        d = self.start
        while d <= self.end:
            yield d
            d += timedelta(days=1)

    def date_keys(self) -> frozenset[str]:
        return frozenset(date_key(d) for d in self.days())

    def widened(self, days: int) -> "DateRange":
        return DateRange(self.start - timedelta(days=days), self.end + timedelta(days=days))

    def clamp_start(self, earliest: Optional[date]) -> Optional["DateRange"]:
        """Drop the part before earliest; None when nothing is left."""

        if earliest is None or self.start >= earliest:
            return self
        if self.end < earliest:
            return None
        return DateRange(earliest, self.end)

    def __len__(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class PeriodSummary:
    """Per-agent week/month rollup."""

    user_id: str
    agent_name: str
    days_present: int
    late_days: int
    total_work_minutes: int
    avg_first_login: Optional[time]
    avg_last_logout: Optional[time]
    days_recorded: int = 0
