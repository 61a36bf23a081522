from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import mysql.connector
from mysql.connector.constants import ClientFlag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    user: str
    password: str
    database: str
    port: int = 3306
    connect_timeout: int = 10

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DBConfig":
        """Build from a settings ``DB_CONFIG`` dict."""
        return cls(
            host=str(values["host"]),
            user=str(values["user"]),
            password=str(values.get("password") or ""),
            database=str(values["database"]),
            port=int(values.get("port") or 3306),
            connect_timeout=int(values.get("connect_timeout") or 10),
        )


class DatabaseConnection:
    """Process-wide connection factory for the timesheet store.

    Each repository call opens its own short-lived connection.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self.config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            logger.info("using database %s on %s:%s", config.database, config.host, config.port)
            cls._instance = cls(config)
        return cls._instance

    def connect(self):
        c = self.config
        return mysql.connector.connect(
            host=c.host,
            port=c.port,
            user=c.user,
            password=c.password,
            database=c.database,
            connection_timeout=c.connect_timeout,
            charset="utf8mb4",
            # rowcount reports matched rows, so unchanged updates still count
            client_flags=[ClientFlag.FOUND_ROWS],
        )
