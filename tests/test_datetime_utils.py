from datetime import time, timedelta

import pytest

from src.attendance_worktime.attendance_worktime.common.datetime_utils import (
    format_hhmm,
    parse_iso_date,
    round_minutes,
    time_from_seconds,
)
from src.attendance_worktime.attendance_worktime.common.validators import require_period
from src.attendance_worktime.attendance_worktime.core.enums import Period
from src.attendance_worktime.attendance_worktime.core.exceptions import ValidationError


@pytest.mark.parametrize(
    "seconds, minutes",
    [(0, 0), (29, 0), (30, 1), (89, 1), (90, 2), (150, 3), (32400, 540)],
)
def test_round_minutes_half_up(seconds, minutes):
    assert round_minutes(timedelta(seconds=seconds)) == minutes


def test_format_hhmm():
    assert format_hhmm(0) == "00:00"
    assert format_hhmm(545) == "09:05"
    assert format_hhmm(1500) == "25:00"


def test_time_from_seconds_rounds_to_the_second():
    assert time_from_seconds(34200.4) == time(9, 30)


def test_parse_iso_date_rejects_other_formats():
    with pytest.raises(ValidationError):
        parse_iso_date("2025/03/10")


def test_require_period_normalizes():
    assert require_period(" WEEK ") is Period.WEEK
    with pytest.raises(ValidationError):
        require_period("quarter")
