from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import is_aware
from ..core.enums import MalformedReason
from .model import Malformed, RawActivitySpan


def check_span(span: RawActivitySpan, as_of: datetime) -> Optional[Malformed]:
    """Return Malformed(...) when the span cannot be trusted at all, else None.

    A zero-length span is well formed; it simply credits nothing.
    """

    if not isinstance(span.start, datetime) or not is_aware(span.start):
        return Malformed(span, MalformedReason.NAIVE_TIMESTAMP)
    if span.end is not None and (not isinstance(span.end, datetime) or not is_aware(span.end)):
        return Malformed(span, MalformedReason.NAIVE_TIMESTAMP)

    if span.end is None:
        if span.start > as_of:
            return Malformed(span, MalformedReason.STARTS_AFTER_AS_OF)
        return None

    if span.end < span.start:
        return Malformed(span, MalformedReason.END_BEFORE_START)
    return None
