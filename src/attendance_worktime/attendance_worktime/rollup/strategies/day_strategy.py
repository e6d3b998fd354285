from __future__ import annotations

from datetime import date
from typing import Sequence

from ...attendance.model import DailyAttendanceRecord
from ...business_calendar.bucketer import TimezoneBucketer
from ...core.enums import Period
from ..model import DateRange
from .base import PeriodStrategy


class DayStrategy(PeriodStrategy):
    """Single date, one daily record per matched user."""

    period = Period.DAY

    def date_range(self, selected: date) -> DateRange:
        return DateRange(selected, selected)

    def build(self, records: Sequence[DailyAttendanceRecord], *, bucketer: TimezoneBucketer) -> list[DailyAttendanceRecord]:
        return sorted(records, key=lambda r: (r.user_id, r.date_key))
