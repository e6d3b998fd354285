from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, TypeVar

from ..activity.repository import ActivityRepository
from ..attendance.model import AggregationStats
from ..common.validators import require_aware, require_period
from ..core.enums import Period
from ..core.exceptions import DataUnavailable
from ..engine import AttendanceEngine, AttendanceResult
from ..users.repository import RosterProvider
from .repository import StoredAttendanceRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AttendanceService:
    """Fetch everything a period needs, then hand it to the engine in one go.

    Any collaborator failure aborts the whole request with DataUnavailable;
    partial data is never aggregated.
    """

    def __init__(
        self,
        roster: RosterProvider,
        activities: ActivityRepository,
        stored: StoredAttendanceRepository,
        *,
        engine: Optional[AttendanceEngine] = None,
    ):
        self._roster = roster
        self._activities = activities
        self._stored = stored
        self._engine = engine or AttendanceEngine()

    @property
    def engine(self) -> AttendanceEngine:
        return self._engine

    def overview(
        self,
        *,
        period: "Period | str",
        selected_date: date,
        as_of: datetime,
        team_id: Optional[str] = None,
    ) -> AttendanceResult:
        p = require_period(period)
        require_aware(as_of, "as_of")

        effective = self._engine.date_range(p, selected_date)
        if effective is None:
            return AttendanceResult(period=p, date_range=None, rows=[], stats=AggregationStats())

        members = self._fetch("roster", lambda: list(self._roster.list_members(team_id)))
        if not members:
            return AttendanceResult(period=p, date_range=effective, rows=[], stats=AggregationStats())

        user_ids = [m.user_id for m in members]
        agent_names = {m.user_id: m.display_name for m in members}

        fetch_range = self._engine.fetch_range(p, selected_date)
        bucketer = self._engine.bucketer
        start, _ = bucketer.day_bounds(fetch_range.start)
        _, end = bucketer.day_bounds(fetch_range.end)

        spans = self._fetch(
            "activity spans",
            lambda: list(self._activities.fetch_activity_spans(user_ids, start, end)),
        )
        stored_rows = self._fetch(
            "stored attendance",
            lambda: list(self._stored.fetch_stored_attendance(user_ids, effective.start, effective.end)),
        )

        allowed = set(user_ids)
        spans = [s for s in spans if s.user_id in allowed]
        stored_rows = [r for r in stored_rows if r.user_id in allowed]

        logger.info(
            "Attendance %s %s: %d member(s), %d span(s), %d stored row(s)",
            p.value,
            selected_date.isoformat(),
            len(members),
            len(spans),
            len(stored_rows),
        )
        return self._engine.compute(
            p,
            selected_date,
            spans,
            None,
            stored_rows,
            as_of,
            agent_names=agent_names,
        )

    @staticmethod
    def _fetch(what: str, fn: Callable[[], T]) -> T:
        try:
            return fn()
        except DataUnavailable:
            raise
        except Exception as exc:
            logger.error("Fetching %s failed: %s", what, exc)
            raise DataUnavailable(f"Could not fetch {what}") from exc
