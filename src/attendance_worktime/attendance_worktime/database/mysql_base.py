from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

import mysql.connector

from ..core.exceptions import DataUnavailable
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Read-only cursor; connector failures surface as DataUnavailable."""

    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as exc:
        logger.error("Database connection failed: %s", exc)
        raise DataUnavailable("Attendance database unreachable") from exc

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield cur
        finally:
            cur.close()
    except mysql.connector.Error as exc:
        logger.error("Database query failed: %s", exc)
        raise DataUnavailable("Attendance query failed") from exc
    finally:
        conn.close()


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_placeholders(values: Sequence[Any]) -> str:
    """Comma-separated %s placeholders for an IN (...) clause."""

    if not values:
        raise ValueError("IN clause needs at least one value")
    return ",".join(["%s"] * len(values))


def as_utc(value: Any) -> Optional[datetime]:
    """Normalize MySQL DATETIME values to aware UTC datetimes.

    Columns are stored in UTC; mysql-connector returns them naive (or as
    strings with some connection settings).
    """

    if value is None:
        return None

    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("T", " "))

    if not isinstance(value, datetime):
        raise TypeError(f"Unsupported MySQL DATETIME value type: {type(value)!r}")

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_db_utc(value: datetime) -> datetime:
    """Aware instant -> naive UTC for query parameters."""

    return value.astimezone(timezone.utc).replace(tzinfo=None)
