from __future__ import annotations

from collections import defaultdict
from datetime import datetime, time
from typing import Iterable, Optional, Sequence

from ..attendance.model import DailyAttendanceRecord
from ..business_calendar.bucketer import TimezoneBucketer
from ..common.datetime_utils import seconds_since_midnight, time_from_seconds
from ..core.constants import PRESENT_STATUS
from .model import PeriodSummary


def is_present(record: DailyAttendanceRecord) -> bool:
    return record.work_minutes > 0 or (record.status or "").lower() == PRESENT_STATUS


def average_time_of_day(instants: Iterable[Optional[datetime]], bucketer: TimezoneBucketer) -> Optional[time]:
    """Mean business-local time of day over the non-null instants."""

    seconds = [seconds_since_midnight(bucketer.to_local(i)) for i in instants if i is not None]
    if not seconds:
        return None
    return time_from_seconds(sum(seconds) / len(seconds))


def summarize(records: Sequence[DailyAttendanceRecord], bucketer: TimezoneBucketer) -> list[PeriodSummary]:
    by_user: dict[str, list[DailyAttendanceRecord]] = defaultdict(list)
    for r in records:
        by_user[r.user_id].append(r)

    summaries = []
    for user_id in sorted(by_user):
        rows = by_user[user_id]
        summaries.append(
            PeriodSummary(
                user_id=user_id,
                agent_name=rows[0].agent_name,
                days_present=sum(1 for r in rows if is_present(r)),
                late_days=sum(1 for r in rows if r.is_late),
                total_work_minutes=sum(r.work_minutes for r in rows),
                avg_first_login=average_time_of_day((r.first_login for r in rows), bucketer),
                avg_last_logout=average_time_of_day((r.last_logout for r in rows), bucketer),
                days_recorded=len(rows),
            )
        )
    return summaries
