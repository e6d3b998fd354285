from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import date_key
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_utc, db_cursor, fetchall, in_placeholders
from .model import StoredFallback
from .repository import StoredAttendanceRepository


class MySQLAttendanceRepository(StoredAttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_stored_attendance(
        self,
        user_ids: Sequence[str],
        start_date: date,
        end_date: date,
    ) -> Sequence[StoredFallback]:
        if not user_ids:
            return []

        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT user_id, date, total_work_minutes, first_login, last_logout, is_late, status
                FROM attendance_records
                WHERE user_id IN ({in_placeholders(user_ids)})
                  AND date BETWEEN %s AND %s
                ORDER BY date ASC, user_id ASC
                """,
                (*[str(u) for u in user_ids], start_date, end_date),
            )
            rows = fetchall(cur)

        return [
            StoredFallback(
                user_id=str(r["user_id"]),
                date_key=r["date"] if isinstance(r["date"], str) else date_key(r["date"]),
                total_work_minutes=int(r["total_work_minutes"]) if r.get("total_work_minutes") is not None else None,
                first_login=as_utc(r.get("first_login")),
                last_logout=as_utc(r.get("last_logout")),
                is_late=bool(r.get("is_late") or False),
                status=r.get("status"),
            )
            for r in rows
        ]
