from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    """Read access to the attendance database (profiles, activity_logs, attendance_records)."""

    host: str
    user: str
    password: str
    database: str
    port: int = 3306
    connect_timeout: int = 10

    @classmethod
    def from_mapping(cls, db_config: Mapping[str, Any]) -> "DBConfig":
        missing = [k for k in ("host", "user", "database") if not db_config.get(k)]
        if missing:
            raise ValueError(f"DB_CONFIG missing: {', '.join(missing)}")
        return cls(
            host=str(db_config["host"]),
            user=str(db_config["user"]),
            password=str(db_config.get("password") or ""),
            database=str(db_config["database"]),
            port=int(db_config.get("port") or 3306),
            connect_timeout=int(db_config.get("connect_timeout") or 10),
        )

    def describe(self) -> str:
        # Safe for logs: no password.
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Singleton-like DB connection factory.

    Note: One short-lived autocommit connection per query; nothing is ever written.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = DatabaseConnection(config)
        return cls._instance

    def connect(self):
        cfg = self._config
        return mysql.connector.connect(
            host=cfg.host,
            port=cfg.port,
            user=cfg.user,
            password=cfg.password,
            database=cfg.database,
            connection_timeout=cfg.connect_timeout,
            autocommit=True,
        )
