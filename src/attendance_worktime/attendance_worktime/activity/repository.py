from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..spans.model import RawActivitySpan


class ActivityRepository(Protocol):
    def fetch_activity_spans(
        self,
        user_ids: Sequence[str],
        start: datetime,
        end: datetime,
    ) -> Sequence[RawActivitySpan]:
        """All activity kinds for the users, started in [start, end).

        Raises DataUnavailable when the store cannot be read.
        """

        raise NotImplementedError
