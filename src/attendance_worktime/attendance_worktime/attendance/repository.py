from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import StoredFallback


class StoredAttendanceRepository(Protocol):
    def fetch_stored_attendance(
        self,
        user_ids: Sequence[str],
        start_date: date,
        end_date: date,
    ) -> Sequence[StoredFallback]:
        """Stored daily rows with start_date <= date <= end_date.

        Raises DataUnavailable when the store cannot be read.
        """

        raise NotImplementedError
