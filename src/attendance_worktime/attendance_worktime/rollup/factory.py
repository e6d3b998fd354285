from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_period
from ..core.enums import Period
from .strategies.base import PeriodStrategy
from .strategies.day_strategy import DayStrategy
from .strategies.month_strategy import MonthStrategy
from .strategies.week_strategy import WeekStrategy


@dataclass
class PeriodStrategyFactory:
    """Factory Pattern: choose the rollup strategy for a period mode."""

    def for_period(self, period: "Period | str") -> PeriodStrategy:
        p = require_period(period)
        if p is Period.WEEK:
            return WeekStrategy()
        if p is Period.MONTH:
            return MonthStrategy()
        return DayStrategy()
