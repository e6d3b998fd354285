from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .activity.mysql_activity_repository import MySQLActivityRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.settings import EngineSettings
from .database.connection import DBConfig, DatabaseConnection
from .engine import AttendanceEngine
from .users.mysql_user_repository import MySQLRosterRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    roster_repo: MySQLRosterRepository
    activity_repo: MySQLActivityRepository
    attendance_repo: MySQLAttendanceRepository

    engine: AttendanceEngine
    attendance_service: AttendanceService


def build_container(*, db_config: dict, engine_settings: Optional[EngineSettings] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    roster_repo = MySQLRosterRepository(conn)
    activity_repo = MySQLActivityRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    engine = AttendanceEngine(engine_settings)
    attendance_service = AttendanceService(roster_repo, activity_repo, attendance_repo, engine=engine)

    return Container(
        conn=conn,
        roster_repo=roster_repo,
        activity_repo=activity_repo,
        attendance_repo=attendance_repo,
        engine=engine,
        attendance_service=attendance_service,
    )
