from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

from ...attendance.model import DailyAttendanceRecord
from ...business_calendar.bucketer import TimezoneBucketer
from ...core.enums import Period
from ..model import DateRange, PeriodSummary
from ..summary import summarize
from .base import PeriodStrategy


class WeekStrategy(PeriodStrategy):
    """Sunday-to-Saturday week containing the selected date."""

    period = Period.WEEK

    def date_range(self, selected: date) -> DateRange:
        start = selected - timedelta(days=(selected.weekday() + 1) % 7)
        return DateRange(start, start + timedelta(days=6))

    def build(self, records: Sequence[DailyAttendanceRecord], *, bucketer: TimezoneBucketer) -> list[PeriodSummary]:
        return summarize(records, bucketer)
