"""Daily attendance aggregation.

Work minutes come from work-kind spans only, clamped to the day's business
window and merged. First login / last logout come from every span of the day,
unclamped. A stored daily total is used only when live data credits zero
minutes and the stored value is physically possible.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import Executor
from functools import partial
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import AbstractSet, Iterable, Mapping, Optional, Sequence

from ..business_calendar.work_window import WorkWindow, WorkWindowCache, WorkWindowResolver
from ..common.validators import require_aware
from ..core.constants import DEFAULT_AGENT_NAME, DEFAULT_FALLBACK_MAX_MINUTES, DEFAULT_WORK_ACTIVITY_KINDS
from ..core.enums import MinutesSource
from ..spans.clamper import SpanClamper
from ..spans.merger import IntervalMerger
from ..spans.model import Clamped, Discarded, Malformed, RawActivitySpan
from ..spans.validators import check_span
from .model import AggregationStats, DailyAttendanceRecord, StoredFallback

logger = logging.getLogger(__name__)

GroupKey = tuple[str, str]


@dataclass(frozen=True)
class AggregationResult:
    records: list[DailyAttendanceRecord]
    stats: AggregationStats


@dataclass(frozen=True)
class _Group:
    key: GroupKey
    work_spans: tuple[RawActivitySpan, ...]
    activity_spans: tuple[RawActivitySpan, ...]
    fallback: Optional[StoredFallback]
    window: Optional[WorkWindow]
    agent_name: str


class AttendanceAggregator:
    def __init__(
        self,
        resolver: WorkWindowResolver,
        *,
        clamper: Optional[SpanClamper] = None,
        merger: Optional[IntervalMerger] = None,
        fallback_max_minutes: int = DEFAULT_FALLBACK_MAX_MINUTES,
        work_kinds: AbstractSet[str] = DEFAULT_WORK_ACTIVITY_KINDS,
        ongoing_cap: Optional[timedelta] = None,
    ):
        self._resolver = resolver
        self._bucketer = resolver.bucketer
        self._ongoing_cap = ongoing_cap
        self._clamper = clamper or SpanClamper(ongoing_cap=ongoing_cap)
        self._merger = merger or IntervalMerger()
        self._fallback_max_minutes = int(fallback_max_minutes)
        self._work_kinds = frozenset(work_kinds)

    def work_spans_of(self, spans: Iterable[RawActivitySpan]) -> list[RawActivitySpan]:
        return [s for s in spans if s.activity_kind in self._work_kinds]

    def is_fallback_usable(self, row: Optional[StoredFallback]) -> bool:
        if row is None or row.total_work_minutes is None:
            return False
        return 0 < row.total_work_minutes <= self._fallback_max_minutes

    def aggregate(
        self,
        *,
        raw_spans: Sequence[RawActivitySpan],
        work_spans: Optional[Sequence[RawActivitySpan]],
        fallback_rows: Sequence[StoredFallback],
        as_of: datetime,
        date_keys: Optional[AbstractSet[str]] = None,
        agent_names: Optional[Mapping[str, str]] = None,
        cache: Optional[WorkWindowCache] = None,
        executor: Optional[Executor] = None,
    ) -> AggregationResult:
        """One DailyAttendanceRecord per (user_id, date_key), sorted.

        User ids are compared as strings; agent_names keys are normalised the
        same way. The executor runs one task per group and is meant for
        ThreadPoolExecutor; groups are not built to be pickled.
        """

        as_of = require_aware(as_of, "as_of")
        cache = cache if cache is not None else WorkWindowCache()
        names = {str(k): v for k, v in (agent_names or {}).items()}
        if work_spans is None:
            work_spans = self.work_spans_of(raw_spans)

        stats = AggregationStats()
        counted: set[RawActivitySpan] = set()
        work_by_key = self._bucket(work_spans, as_of, stats, counted, work=True)
        activity_by_key = self._bucket(raw_spans, as_of, stats, counted, work=False)

        fallback_by_key: dict[GroupKey, StoredFallback] = {}
        for row in fallback_rows:
            fallback_by_key[(str(row.user_id), row.date_key)] = row

        keys = set(work_by_key) | set(activity_by_key) | set(fallback_by_key)
        if date_keys is not None:
            keys = {k for k in keys if k[1] in date_keys}

        # Windows are resolved up front so group workers stay pure.
        groups = [
            _Group(
                key=k,
                work_spans=tuple(work_by_key.get(k, ())),
                activity_spans=tuple(activity_by_key.get(k, ())),
                fallback=fallback_by_key.get(k),
                window=self._resolver.resolve(k[1], cache),
                agent_name=names.get(k[0], DEFAULT_AGENT_NAME),
            )
            for k in sorted(keys)
        ]

        if executor is not None:
            outcomes = list(executor.map(partial(self._compute_group, as_of=as_of), groups))
        else:
            outcomes = [self._compute_group(g, as_of) for g in groups]

        records: list[DailyAttendanceRecord] = []
        for record, group_stats in outcomes:
            records.append(record)
            stats.merge(group_stats)
        records.sort(key=lambda r: (r.user_id, r.date_key))

        if stats.malformed_total:
            logger.warning(
                "Skipped %d malformed span(s): %s",
                stats.malformed_total,
                {k.value: v for k, v in stats.malformed.items()},
            )
        logger.debug("Aggregated %d daily record(s): %s", len(records), stats.as_dict())
        return AggregationResult(records=records, stats=stats)

    def _bucket(
        self,
        spans: Iterable[RawActivitySpan],
        as_of: datetime,
        stats: AggregationStats,
        counted: set,
        *,
        work: bool,
    ) -> dict[GroupKey, list[RawActivitySpan]]:
        grouped: dict[GroupKey, list[RawActivitySpan]] = defaultdict(list)
        for span in spans:
            if work:
                stats.spans_seen += 1
            malformed = check_span(span, as_of)
            if malformed:
                # A span listed in both work_spans and raw_spans is counted once.
                if span not in counted:
                    counted.add(span)
                    stats.count_malformed(malformed.reason)
                continue
            grouped[(str(span.user_id), self._bucketer.date_key(span.start))].append(span)
        return grouped

    def _compute_group(self, group: _Group, as_of: datetime) -> tuple[DailyAttendanceRecord, AggregationStats]:
        user_id, key = group.key
        stats = AggregationStats()

        clamped = []
        for span in group.work_spans:
            outcome = self._clamper.clamp(span, group.window, date_key=key, as_of=as_of)
            if isinstance(outcome, Clamped):
                stats.clamped += 1
                clamped.append(outcome.span)
            elif isinstance(outcome, Discarded):
                stats.count_discarded(outcome.reason)
            elif isinstance(outcome, Malformed):
                stats.count_malformed(outcome.reason)

        merged = self._merger.merge_and_sum(clamped)
        fallback = group.fallback
        has_spans = bool(group.work_spans or group.activity_spans)

        if merged.minutes > 0:
            # Capped: per-interval rounding may sum past the window length.
            minutes = min(merged.minutes, group.window.length_minutes) if group.window else merged.minutes
            source = MinutesSource.COMPUTED
        elif self.is_fallback_usable(fallback):
            minutes, source = int(fallback.total_work_minutes), MinutesSource.FALLBACK
            stats.fallback_applied += 1
        else:
            if fallback is not None and fallback.total_work_minutes is not None:
                stats.fallback_rejected += 1
            minutes = 0
            source = MinutesSource.COMPUTED if has_spans else MinutesSource.NONE

        # Unclamped: a 07:00 start is still the day's first login.
        all_spans = group.activity_spans + group.work_spans
        if all_spans:
            first_login = min(s.start for s in all_spans)
            last_logout = max(s.resolved_end(as_of, ongoing_cap=self._ongoing_cap) for s in all_spans)
        elif fallback is not None:
            first_login, last_logout = fallback.first_login, fallback.last_logout
        else:
            first_login = last_logout = None

        record = DailyAttendanceRecord(
            user_id=user_id,
            date_key=key,
            work_minutes=minutes,
            first_login=first_login,
            last_logout=last_logout,
            is_late=bool(fallback.is_late) if fallback else False,
            status=fallback.status if fallback else None,
            agent_name=group.agent_name,
            minutes_source=source,
            intervals=merged.intervals if source is MinutesSource.COMPUTED else (),
        )
        return record, stats
