"""Work-time aggregation engine: the function-level contract used by the application.

Pure and synchronous. All inputs (spans, stored rows, as_of) are supplied by
the caller; the only state is the per-call work-window cache.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from dataclasses import dataclass
from datetime import date, datetime
from typing import Mapping, Optional, Sequence

from .attendance.aggregator import AttendanceAggregator
from .attendance.model import AggregationStats, StoredFallback
from .business_calendar.bucketer import TimezoneBucketer
from .business_calendar.work_window import WorkWindowCache, WorkWindowResolver
from .common.validators import require_aware, require_period
from .core.constants import FETCH_BUFFER_DAYS
from .core.enums import Period
from .core.settings import EngineSettings
from .rollup.model import DateRange
from .rollup.service import PeriodRollup
from .rollup.strategies.base import RollupRows
from .spans.model import RawActivitySpan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceResult:
    period: Period
    date_range: Optional[DateRange]
    rows: RollupRows
    stats: AggregationStats


class AttendanceEngine:
    def __init__(self, settings: Optional[EngineSettings] = None):
        self._settings = settings or EngineSettings()
        self._bucketer = self._settings.build_bucketer()
        self._resolver = WorkWindowResolver.from_work_hours(self._bucketer, self._settings.work_hours)
        self._aggregator = AttendanceAggregator(
            self._resolver,
            fallback_max_minutes=self._settings.fallback_max_minutes,
            work_kinds=self._settings.work_activity_kinds,
            ongoing_cap=self._settings.ongoing_cap,
        )
        self._rollup = PeriodRollup(self._bucketer, data_start=self._settings.data_start_date)

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def bucketer(self) -> TimezoneBucketer:
        return self._bucketer

    @property
    def resolver(self) -> WorkWindowResolver:
        return self._resolver

    @property
    def aggregator(self) -> AttendanceAggregator:
        return self._aggregator

    def date_range(self, period: "Period | str", selected_date: date) -> Optional[DateRange]:
        return self._rollup.date_range(period, selected_date)

    def fetch_range(self, period: "Period | str", selected_date: date) -> Optional[DateRange]:
        """Range the data-access layer must cover: requested dates plus a buffer day each side.

        Catches spans that start just across a local midnight.
        """

        effective = self.date_range(period, selected_date)
        return effective.widened(FETCH_BUFFER_DAYS) if effective else None

    def compute(
        self,
        period: "Period | str",
        selected_date: date,
        raw_spans: Sequence[RawActivitySpan],
        work_spans: Optional[Sequence[RawActivitySpan]],
        fallback_rows: Sequence[StoredFallback],
        as_of: datetime,
        *,
        agent_names: Optional[Mapping[str, str]] = None,
        cache: Optional[WorkWindowCache] = None,
        executor: Optional[Executor] = None,
    ) -> AttendanceResult:
        p = require_period(period)
        require_aware(as_of, "as_of")

        effective = self.date_range(p, selected_date)
        if effective is None:
            logger.info("%s %s predates data start %s, nothing to compute", p.value, selected_date, self._settings.data_start_date)
            return AttendanceResult(period=p, date_range=None, rows=[], stats=AggregationStats())

        result = self._aggregator.aggregate(
            raw_spans=raw_spans,
            work_spans=work_spans,
            fallback_rows=fallback_rows,
            as_of=as_of,
            date_keys=effective.date_keys(),
            agent_names=agent_names,
            cache=cache,
            executor=executor,
        )
        rows = self._rollup.roll_up(p, result.records)
        return AttendanceResult(period=p, date_range=effective, rows=rows, stats=result.stats)


def compute_attendance(
    period: "Period | str",
    selected_date: date,
    raw_spans: Sequence[RawActivitySpan],
    work_spans: Optional[Sequence[RawActivitySpan]],
    fallback_rows: Sequence[StoredFallback],
    as_of: datetime,
    *,
    settings: Optional[EngineSettings] = None,
    agent_names: Optional[Mapping[str, str]] = None,
    cache: Optional[WorkWindowCache] = None,
    executor: Optional[Executor] = None,
) -> RollupRows:
    """Daily records for "day", per-agent summaries for "week" / "month".

    work_spans may be None, in which case it is derived from raw_spans by
    activity kind. An empty list means "no data"; failures raise.
    """

    engine = AttendanceEngine(settings)
    return engine.compute(
        period,
        selected_date,
        raw_spans,
        work_spans,
        fallback_rows,
        as_of,
        agent_names=agent_names,
        cache=cache,
        executor=executor,
    ).rows
