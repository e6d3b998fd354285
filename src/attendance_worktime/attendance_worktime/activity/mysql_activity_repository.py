from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_utc, db_cursor, fetchall, in_placeholders, to_db_utc
from ..spans.model import RawActivitySpan
from .repository import ActivityRepository


class MySQLActivityRepository(ActivityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_activity_spans(
        self,
        user_ids: Sequence[str],
        start: datetime,
        end: datetime,
    ) -> Sequence[RawActivitySpan]:
        if not user_ids:
            return []

        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT user_id, activity_type, started_at, ended_at
                FROM activity_logs
                WHERE user_id IN ({in_placeholders(user_ids)})
                  AND started_at >= %s AND started_at < %s
                ORDER BY started_at ASC
                """,
                (*[str(u) for u in user_ids], to_db_utc(start), to_db_utc(end)),
            )
            rows = fetchall(cur)

        return [
            RawActivitySpan(
                user_id=str(r["user_id"]),
                activity_kind=str(r["activity_type"]),
                start=as_utc(r["started_at"]),
                end=as_utc(r.get("ended_at")),
            )
            for r in rows
        ]
