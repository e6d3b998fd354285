from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence, Union

from ...attendance.model import DailyAttendanceRecord
from ...business_calendar.bucketer import TimezoneBucketer
from ...core.enums import Period
from ..model import DateRange, PeriodSummary

RollupRows = Union[list[DailyAttendanceRecord], list[PeriodSummary]]


class PeriodStrategy(ABC):
    """Strategy Pattern: how one period mode picks its dates and shapes its output."""

    period: Period

    @abstractmethod
    def date_range(self, selected: date) -> DateRange:
        raise NotImplementedError

    @abstractmethod
    def build(self, records: Sequence[DailyAttendanceRecord], *, bucketer: TimezoneBucketer) -> RollupRows:
        raise NotImplementedError
