from datetime import date, datetime

import pytest

from src.attendance_worktime.attendance_worktime import AttendanceEngine, compute_attendance
from src.attendance_worktime.attendance_worktime.attendance.model import DailyAttendanceRecord, StoredFallback
from src.attendance_worktime.attendance_worktime.business_calendar.work_window import WorkWindowCache
from src.attendance_worktime.attendance_worktime.core.exceptions import ValidationError
from src.attendance_worktime.attendance_worktime.core.settings import EngineSettings
from src.attendance_worktime.attendance_worktime.rollup.model import DateRange, PeriodSummary
from src.attendance_worktime.attendance_worktime.spans.model import RawActivitySpan

WORK = "client_meeting"


def test_day_view_for_a_monday(at, as_of):
    raw = [
        RawActivitySpan("u1", WORK, at(2025, 3, 10, 9, 0), at(2025, 3, 10, 11, 30)),
        RawActivitySpan("u1", WORK, at(2025, 3, 10, 11, 0), at(2025, 3, 10, 12, 0)),
        RawActivitySpan("u1", WORK, at(2025, 3, 11, 10, 0), at(2025, 3, 11, 12, 0)),
    ]

    rows = compute_attendance("day", date(2025, 3, 10), raw, None, [], as_of, agent_names={"u1": "Amira"})

    assert len(rows) == 1
    assert isinstance(rows[0], DailyAttendanceRecord)
    assert rows[0].work_minutes == 120
    assert rows[0].first_login == at(2025, 3, 10, 9, 0)
    assert rows[0].last_logout == at(2025, 3, 10, 12, 0)
    assert rows[0].agent_name == "Amira"


def test_week_view_starts_at_data_start(at):
    raw = [
        RawActivitySpan("u1", WORK, at(2025, 2, 3, 10, 0), at(2025, 2, 3, 12, 0)),
        RawActivitySpan("u1", WORK, at(2025, 2, 4, 10, 0), at(2025, 2, 4, 11, 0)),
        RawActivitySpan("u1", WORK, at(2025, 2, 5, 10, 0), at(2025, 2, 5, 10, 30)),
    ]
    engine = AttendanceEngine()

    result = engine.compute("week", date(2025, 2, 5), raw, None, [], at(2025, 2, 10, 9, 0))

    assert result.date_range == DateRange(date(2025, 2, 4), date(2025, 2, 8))
    [summary] = result.rows
    assert isinstance(summary, PeriodSummary)
    assert summary.days_recorded == 2
    assert summary.days_present == 2
    assert summary.total_work_minutes == 90


def test_month_view_mixes_live_and_stored_days(at, as_of):
    raw = [RawActivitySpan("u1", WORK, at(2025, 3, 3, 10, 0), at(2025, 3, 3, 13, 0))]
    stored = [
        StoredFallback("u1", "2025-03-04", 240, is_late=True, status="present"),
        StoredFallback("u1", "2025-03-05", 1500),
        StoredFallback("u2", "2025-03-05", 0, status="absent"),
    ]

    [u1, u2] = compute_attendance("month", date(2025, 3, 18), raw, None, stored, as_of)

    assert u1.total_work_minutes == 180 + 240
    assert u1.days_present == 2
    assert u1.late_days == 1
    assert u1.days_recorded == 3
    assert u1.agent_name == "Unknown"
    assert u2.days_present == 0


def test_request_before_data_start_is_empty(at, as_of):
    raw = [RawActivitySpan("u1", WORK, at(2025, 2, 3, 10, 0), at(2025, 2, 3, 12, 0))]

    assert compute_attendance("day", date(2025, 2, 3), raw, None, [], as_of) == []


def test_no_data_is_an_empty_list(as_of):
    assert compute_attendance("week", date(2025, 3, 12), [], [], [], as_of) == []


def test_unknown_period_is_rejected(as_of):
    with pytest.raises(ValidationError):
        compute_attendance("year", date(2025, 3, 12), [], None, [], as_of)


def test_naive_as_of_is_rejected():
    with pytest.raises(ValidationError):
        compute_attendance("day", date(2025, 3, 12), [], None, [], datetime(2025, 3, 12, 12, 0))


def test_fetch_range_is_widened_by_a_day():
    engine = AttendanceEngine()

    assert engine.fetch_range("week", date(2025, 3, 12)) == DateRange(date(2025, 3, 8), date(2025, 3, 16))
    assert engine.fetch_range("day", date(2025, 1, 1)) is None


def test_caller_owned_cache_is_reused(at, as_of):
    cache = WorkWindowCache()
    raw = [RawActivitySpan("u1", WORK, at(2025, 3, 10, 10, 0), at(2025, 3, 10, 11, 0))]

    compute_attendance("day", date(2025, 3, 10), raw, None, [], as_of, cache=cache)

    assert "2025-03-10" in cache


def test_custom_settings_change_the_window(at, as_of):
    hours = {
        "monday": ("08:00", "12:00"),
        "tuesday": ("08:00", "12:00"),
        "wednesday": ("08:00", "12:00"),
        "thursday": ("08:00", "12:00"),
        "friday": None,
        "saturday": None,
        "sunday": ("08:00", "12:00"),
    }
    settings = EngineSettings(work_hours=hours, data_start_date=None)
    raw = [RawActivitySpan("u1", WORK, at(2025, 3, 9, 7, 0), at(2025, 3, 9, 9, 0))]

    [row] = compute_attendance("day", date(2025, 3, 9), raw, None, [], as_of, settings=settings)

    assert row.work_minutes == 60


def test_ongoing_cap_from_settings(at):
    settings = EngineSettings(ongoing_span_cap_minutes=15)
    raw = [RawActivitySpan("u1", WORK, at(2025, 3, 10, 10, 0))]

    [row] = compute_attendance("day", date(2025, 3, 10), raw, None, [], at(2025, 3, 10, 13, 0), settings=settings)

    assert row.work_minutes == 15
    assert row.last_logout == at(2025, 3, 10, 10, 15)
