from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Agent
from .repository import RosterProvider


class MySQLRosterRepository(RosterProvider):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_members(self, team_id: Optional[str] = None) -> Sequence[Agent]:
        clauses = ["is_active=1"]
        params: list[object] = []
        if team_id:
            clauses.append("team_id=%s")
            params.append(str(team_id))

        with db_cursor(self._conn_factory) as cur:
            cur.execute(
                f"""
                SELECT id, full_name, username, team_id, is_active
                FROM profiles
                WHERE {" AND ".join(clauses)}
                ORDER BY id ASC
                """,
                tuple(params),
            )
            rows = fetchall(cur)

        return [
            Agent(
                user_id=str(r["id"]),
                full_name=r.get("full_name"),
                username=r.get("username"),
                team_id=str(r["team_id"]) if r.get("team_id") is not None else None,
                is_active=bool(r.get("is_active", True)),
            )
            for r in rows
        ]
