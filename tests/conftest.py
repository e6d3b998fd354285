from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from src.attendance_worktime.attendance_worktime.attendance.aggregator import AttendanceAggregator
from src.attendance_worktime.attendance_worktime.business_calendar.bucketer import TimezoneBucketer
from src.attendance_worktime.attendance_worktime.business_calendar.work_window import WorkWindowResolver

DUBAI = timezone(timedelta(hours=4))


@pytest.fixture
def at():
    """Build an Asia/Dubai instant: at(2025, 3, 10, 9, 30)."""

    def _at(year, month, day, hour=0, minute=0, second=0):
        return datetime(year, month, day, hour, minute, second, tzinfo=DUBAI)

    return _at


@pytest.fixture
def bucketer():
    return TimezoneBucketer.from_offset_minutes(240)


@pytest.fixture
def resolver(bucketer):
    return WorkWindowResolver.from_work_hours(bucketer)


@pytest.fixture
def aggregator(resolver):
    return AttendanceAggregator(resolver)


@pytest.fixture
def as_of(at):
    return at(2025, 3, 20, 12, 0)
