from datetime import date, datetime, timedelta, timezone

import pytest

from src.attendance_worktime.attendance_worktime.business_calendar.bucketer import TimezoneBucketer
from src.attendance_worktime.attendance_worktime.core.exceptions import InvalidConfiguration, ValidationError


def test_late_utc_evening_lands_on_next_dubai_day(bucketer):
    instant = datetime(2025, 3, 10, 23, 30, tzinfo=timezone.utc)

    assert bucketer.date_key(instant) == "2025-03-11"


def test_last_minute_of_dubai_day_stays_on_that_day(bucketer):
    instant = datetime(2025, 3, 10, 19, 59, tzinfo=timezone.utc)

    assert bucketer.date_key(instant) == "2025-03-10"


def test_date_keys_never_go_backwards(bucketer):
    start = datetime(2025, 3, 1, 0, 0, tzinfo=timezone.utc)
    keys = [bucketer.date_key(start + timedelta(minutes=37 * i)) for i in range(300)]

    assert keys == sorted(keys)


def test_naive_instant_is_rejected(bucketer):
    with pytest.raises(ValidationError):
        bucketer.date_key(datetime(2025, 3, 10, 9, 0))


def test_named_zone_matches_fixed_offset(bucketer):
    try:
        named = TimezoneBucketer.from_name("Asia/Dubai")
    except InvalidConfiguration:
        pytest.skip("no tz database on this host")
    instant = datetime(2025, 3, 10, 21, 15, tzinfo=timezone.utc)

    assert named.date_key(instant) == bucketer.date_key(instant) == "2025-03-11"


def test_unknown_zone_name_is_a_configuration_error():
    with pytest.raises(InvalidConfiguration):
        TimezoneBucketer.from_name("Mars/Olympus_Mons")


def test_offset_beyond_fourteen_hours_is_a_configuration_error():
    with pytest.raises(InvalidConfiguration):
        TimezoneBucketer.from_offset_minutes(15 * 60)


def test_day_bounds_are_local_midnights(bucketer, at):
    start, end = bucketer.day_bounds(date(2025, 3, 10))

    assert start == at(2025, 3, 10)
    assert end == at(2025, 3, 11)
    assert start.astimezone(timezone.utc) == datetime(2025, 3, 9, 20, 0, tzinfo=timezone.utc)
