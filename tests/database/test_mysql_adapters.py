from __future__ import annotations

from datetime import date, datetime, timezone

import mysql.connector
import pytest

from src.attendance_worktime.attendance_worktime.activity.mysql_activity_repository import MySQLActivityRepository
from src.attendance_worktime.attendance_worktime.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.attendance_worktime.attendance_worktime.core.exceptions import DataUnavailable
from src.attendance_worktime.attendance_worktime.database.connection import DBConfig
from src.attendance_worktime.attendance_worktime.database.mysql_base import as_utc, db_cursor, in_placeholders
from src.attendance_worktime.attendance_worktime.users.mysql_user_repository import MySQLRosterRepository


class FakeCursor:
    def __init__(self, rows, error=None):
        self.rows = rows
        self.error = error
        self.executed = []
        self.closed = False

    def execute(self, sql, params=()):
        if self.error:
            raise self.error
        self.executed.append((sql, params))

    def fetchall(self):
        return self.rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.closed = False

    def cursor(self, dictionary=True):
        return self._cursor

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows=(), error=None):
        self.cursor = FakeCursor(list(rows), error)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


class UnreachableFactory:
    def connect(self):
        raise mysql.connector.Error("Can't connect to MySQL server")


def test_as_utc_normalizes_connector_values():
    assert as_utc(None) is None
    assert as_utc(datetime(2025, 3, 10, 6, 0)) == datetime(2025, 3, 10, 6, 0, tzinfo=timezone.utc)
    assert as_utc("2025-03-10 06:00:00") == datetime(2025, 3, 10, 6, 0, tzinfo=timezone.utc)
    with pytest.raises(TypeError):
        as_utc(12345)


def test_in_placeholders():
    assert in_placeholders(["a", "b", "c"]) == "%s,%s,%s"
    with pytest.raises(ValueError):
        in_placeholders([])


def test_activity_rows_become_aware_spans(at):
    factory = FakeConnFactory(
        [
            {"user_id": 7, "activity_type": "training", "started_at": datetime(2025, 3, 10, 6, 0), "ended_at": None},
            {"user_id": 8, "activity_type": "break", "started_at": datetime(2025, 3, 10, 7, 0), "ended_at": datetime(2025, 3, 10, 7, 15)},
        ]
    )
    repo = MySQLActivityRepository(factory)

    spans = repo.fetch_activity_spans(["7", "8"], at(2025, 3, 9), at(2025, 3, 12))

    assert spans[0].user_id == "7"
    assert spans[0].start == at(2025, 3, 10, 10, 0)
    assert spans[0].is_ongoing
    assert spans[1].end == at(2025, 3, 10, 11, 15)
    [(sql, params)] = factory.cursor.executed
    assert "activity_logs" in sql
    assert params == ("7", "8", datetime(2025, 3, 8, 20, 0), datetime(2025, 3, 11, 20, 0))
    assert factory.cursor.closed and factory.conn.closed


def test_no_user_ids_means_no_query(at):
    factory = FakeConnFactory()

    assert MySQLActivityRepository(factory).fetch_activity_spans([], at(2025, 3, 9), at(2025, 3, 10)) == []
    assert MySQLAttendanceRepository(factory).fetch_stored_attendance([], date(2025, 3, 9), date(2025, 3, 10)) == []
    assert factory.cursor.executed == []


def test_stored_rows_keep_null_totals():
    factory = FakeConnFactory(
        [
            {"user_id": 7, "date": date(2025, 3, 10), "total_work_minutes": None, "first_login": None, "last_logout": None, "is_late": 0, "status": None},
            {"user_id": 7, "date": "2025-03-11", "total_work_minutes": 315, "first_login": "2025-03-11 06:05:00", "last_logout": None, "is_late": 1, "status": "present"},
        ]
    )

    rows = MySQLAttendanceRepository(factory).fetch_stored_attendance(["7"], date(2025, 3, 10), date(2025, 3, 11))

    assert rows[0].date_key == "2025-03-10"
    assert rows[0].total_work_minutes is None
    assert rows[0].is_late is False
    assert rows[1].total_work_minutes == 315
    assert rows[1].first_login == datetime(2025, 3, 11, 6, 5, tzinfo=timezone.utc)
    assert rows[1].is_late is True


def test_roster_filters_by_team():
    factory = FakeConnFactory([{"id": 3, "full_name": None, "username": "bilal", "team_id": 2, "is_active": 1}])

    [agent] = MySQLRosterRepository(factory).list_members(team_id="2")

    assert agent.user_id == "3"
    assert agent.team_id == "2"
    assert agent.display_name == "bilal"
    [(sql, params)] = factory.cursor.executed
    assert "team_id=%s" in sql
    assert params == ("2",)


def test_unreachable_database_is_data_unavailable():
    with pytest.raises(DataUnavailable):
        MySQLRosterRepository(UnreachableFactory()).list_members()


def test_query_failure_is_data_unavailable_and_closes():
    factory = FakeConnFactory(error=mysql.connector.Error("Table 'activity_logs' doesn't exist"))

    with pytest.raises(DataUnavailable):
        with db_cursor(factory) as cur:
            cur.execute("SELECT 1")
    assert factory.cursor.closed
    assert factory.conn.closed


def test_db_config_from_settings_mapping():
    cfg = DBConfig.from_mapping({"host": "db", "user": "reader", "password": "s3cret", "database": "attendance_db", "port": "3307"})

    assert cfg.port == 3307
    assert cfg.connect_timeout == 10
    assert cfg.describe() == "reader@db:3307/attendance_db"
    with pytest.raises(ValueError, match="host"):
        DBConfig.from_mapping({"user": "reader", "database": "attendance_db"})
