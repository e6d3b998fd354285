from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from ..business_calendar.work_window import WorkWindow
from ..core.enums import DiscardReason
from .model import Clamped, ClampedSpan, ClampResult, Discarded, RawActivitySpan
from .validators import check_span


class SpanClamper:
    """Intersect one raw span with its date's work window.

    No work is credited on a day off, whatever the raw timestamps say.
    """

    def __init__(self, *, ongoing_cap: Optional[timedelta] = None):
        self._ongoing_cap = ongoing_cap

    def clamp(
        self,
        span: RawActivitySpan,
        window: Optional[WorkWindow],
        *,
        date_key: str,
        as_of: datetime,
    ) -> ClampResult:
        malformed = check_span(span, as_of)
        if malformed:
            return malformed

        if window is None:
            return Discarded(span, DiscardReason.NO_WORK_DAY)

        start = max(span.start, window.start)
        end = min(span.resolved_end(as_of, ongoing_cap=self._ongoing_cap), window.end)
        if end <= start:
            return Discarded(span, DiscardReason.OUTSIDE_WINDOW)

        return Clamped(ClampedSpan(user_id=span.user_id, date_key=date_key, start=start, end=end))
