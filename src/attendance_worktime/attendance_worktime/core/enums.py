from __future__ import annotations

from enum import Enum


class Period(str, Enum):
    """Reporting period of an attendance view."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class DiscardReason(str, Enum):
    """Why a well-formed span credits no work minutes."""

    NO_WORK_DAY = "NO_WORK_DAY"
    OUTSIDE_WINDOW = "OUTSIDE_WINDOW"


class MalformedReason(str, Enum):
    """Why a span is rejected as corrupt input."""

    END_BEFORE_START = "END_BEFORE_START"
    NAIVE_TIMESTAMP = "NAIVE_TIMESTAMP"
    STARTS_AFTER_AS_OF = "STARTS_AFTER_AS_OF"


class MinutesSource(str, Enum):
    """Where a daily record's work minutes came from."""

    COMPUTED = "COMPUTED"
    FALLBACK = "FALLBACK"
    NONE = "NONE"
