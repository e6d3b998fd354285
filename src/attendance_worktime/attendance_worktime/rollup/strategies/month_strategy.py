from __future__ import annotations

import calendar
from datetime import date
from typing import Sequence

from ...attendance.model import DailyAttendanceRecord
from ...business_calendar.bucketer import TimezoneBucketer
from ...core.enums import Period
from ..model import DateRange, PeriodSummary
from ..summary import summarize
from .base import PeriodStrategy


class MonthStrategy(PeriodStrategy):
    """Full calendar month containing the selected date."""

    period = Period.MONTH

    def date_range(self, selected: date) -> DateRange:
        last_day = calendar.monthrange(selected.year, selected.month)[1]
        return DateRange(selected.replace(day=1), selected.replace(day=last_day))

    def build(self, records: Sequence[DailyAttendanceRecord], *, bucketer: TimezoneBucketer) -> list[PeriodSummary]:
        return summarize(records, bucketer)
