from __future__ import annotations

from typing import Sequence

from ..common.numbers import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import query_all
from .model import Client, Guard, Site
from .repository import DirectoryRepository


class MySQLDirectoryRepository(DirectoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_guards(self) -> Sequence[Guard]:
        rows = query_all(
            self._conn_factory,
            "SELECT guard_id, first_name, last_name, hourly_rate FROM guards ORDER BY last_name, first_name",
        )
        return [
            Guard(
                guard_id=str(r["guard_id"]),
                first_name=r.get("first_name") or "",
                last_name=r.get("last_name") or "",
                hourly_rate=to_decimal(r.get("hourly_rate")),
            )
            for r in rows
        ]

    def list_sites(self) -> Sequence[Site]:
        rows = query_all(self._conn_factory, "SELECT site_id, site_name FROM sites ORDER BY site_name")
        return [Site(site_id=str(r["site_id"]), site_name=r.get("site_name") or "") for r in rows]

    def list_clients(self) -> Sequence[Client]:
        rows = query_all(self._conn_factory, "SELECT client_id, company_name FROM clients ORDER BY company_name")
        return [Client(client_id=str(r["client_id"]), company_name=r.get("company_name") or "") for r in rows]
