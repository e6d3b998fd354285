from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import DailyAttendanceRecord
from ..business_calendar.bucketer import TimezoneBucketer
from ..core.enums import Period
from .factory import PeriodStrategyFactory
from .model import DateRange
from .strategies.base import PeriodStrategy, RollupRows

logger = logging.getLogger(__name__)


class PeriodRollup:
    """Expands a period request into dates and shapes daily records into output rows.

    Stateless per call: nothing carries over between requests.
    """

    def __init__(
        self,
        bucketer: TimezoneBucketer,
        *,
        data_start: Optional[date] = None,
        factory: Optional[PeriodStrategyFactory] = None,
    ):
        self._bucketer = bucketer
        self._data_start = data_start
        self._factory = factory or PeriodStrategyFactory()

    def strategy(self, period: "Period | str") -> PeriodStrategy:
        return self._factory.for_period(period)

    def date_range(self, period: "Period | str", selected: date) -> Optional[DateRange]:
        """Nominal range for the period, minus anything before the data-start date.

        None means the whole range predates the data and the answer is "no data".
        """

        nominal = self.strategy(period).date_range(selected)
        effective = nominal.clamp_start(self._data_start)
        if effective != nominal:
            logger.debug("Range %s..%s clamped to data start %s", nominal.start, nominal.end, self._data_start)
        return effective

    def roll_up(self, period: "Period | str", records: Sequence[DailyAttendanceRecord]) -> RollupRows:
        return self.strategy(period).build(records, bucketer=self._bucketer)
