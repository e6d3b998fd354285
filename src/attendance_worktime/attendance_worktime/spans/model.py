from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Union

from ..common.datetime_utils import round_minutes
from ..core.enums import DiscardReason, MalformedReason


@dataclass(frozen=True)
class RawActivitySpan:
    """Domain entity: one recorded activity interval.

    end is None while the activity is still ongoing; it is then resolved
    against a caller-supplied as_of instant, never the wall clock.
    """

    user_id: str
    activity_kind: str
    start: datetime
    end: Optional[datetime] = None

    @property
    def is_ongoing(self) -> bool:
        return self.end is None

    def resolved_end(self, as_of: datetime, *, ongoing_cap: Optional[timedelta] = None) -> datetime:
        if self.end is not None:
            return self.end
        if ongoing_cap is not None:
            return min(as_of, self.start + ongoing_cap)
        return as_of


@dataclass(frozen=True)
class ClampedSpan:
    """A span intersected with its date's work window."""

    user_id: str
    date_key: str
    start: datetime
    end: datetime


@dataclass(frozen=True)
class MergedInterval:
    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def minutes(self) -> int:
        return round_minutes(self.duration)


@dataclass(frozen=True)
class Clamped:
    span: ClampedSpan


@dataclass(frozen=True)
class Discarded:
    span: RawActivitySpan
    reason: DiscardReason


@dataclass(frozen=True)
class Malformed:
    span: RawActivitySpan
    reason: MalformedReason


ClampResult = Union[Clamped, Discarded, Malformed]
