from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_AGENT_NAME
from ..core.enums import DiscardReason, MalformedReason, MinutesSource
from ..spans.model import MergedInterval


@dataclass(frozen=True)
class StoredFallback:
    """Domain entity: a previously persisted daily attendance row.

    Less trustworthy than live spans; its total is only used when live data
    credits zero minutes for the day.
    """

    user_id: str
    date_key: str
    total_work_minutes: Optional[int]
    first_login: Optional[datetime] = None
    last_logout: Optional[datetime] = None
    is_late: bool = False
    status: Optional[str] = None


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """One user's attendance on one business-local date."""

    user_id: str
    date_key: str
    work_minutes: int
    first_login: Optional[datetime]
    last_logout: Optional[datetime]
    is_late: bool = False
    status: Optional[str] = None
    agent_name: str = DEFAULT_AGENT_NAME
    minutes_source: MinutesSource = MinutesSource.NONE
    intervals: tuple[MergedInterval, ...] = ()


@dataclass
class AggregationStats:
    """Counters surfaced for observability; never affect results.

    spans_seen and clamped refer to the work-minutes pipeline.
    """

    spans_seen: int = 0
    clamped: int = 0
    discarded: Counter = field(default_factory=Counter)
    malformed: Counter = field(default_factory=Counter)
    fallback_applied: int = 0
    fallback_rejected: int = 0

    @property
    def malformed_total(self) -> int:
        return sum(self.malformed.values())

    @property
    def discarded_total(self) -> int:
        return sum(self.discarded.values())

    def count_discarded(self, reason: DiscardReason) -> None:
        self.discarded[reason] += 1

    def count_malformed(self, reason: MalformedReason) -> None:
        self.malformed[reason] += 1

    def merge(self, other: "AggregationStats") -> None:
        self.spans_seen += other.spans_seen
        self.clamped += other.clamped
        self.discarded.update(other.discarded)
        self.malformed.update(other.malformed)
        self.fallback_applied += other.fallback_applied
        self.fallback_rejected += other.fallback_rejected

    def as_dict(self) -> dict:
        return {
            "spans_seen": self.spans_seen,
            "clamped": self.clamped,
            "discarded": {k.value: v for k, v in self.discarded.items()},
            "malformed": {k.value: v for k, v in self.malformed.items()},
            "fallback_applied": self.fallback_applied,
            "fallback_rejected": self.fallback_rejected,
        }
