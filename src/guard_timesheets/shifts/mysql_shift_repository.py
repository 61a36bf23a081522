from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..common.numbers import to_decimal
from ..database.connection import DatabaseConnection
from ..database.mysql_base import mysql_wall_clock, query_all, query_one
from .model import ShiftSchedule
from .repository import ShiftRepository

_SELECT = "SELECT shift_id, shift_date, start_time, end_time, site_id, client_id, hourly_rate FROM shifts"


def _opt_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def _to_shift(r: Dict[str, Any]) -> ShiftSchedule:
    return ShiftSchedule(
        shift_id=str(r["shift_id"]),
        shift_date=r.get("shift_date"),
        start_time=mysql_wall_clock(r.get("start_time")),
        end_time=mysql_wall_clock(r.get("end_time")),
        site_id=_opt_str(r.get("site_id")),
        client_id=_opt_str(r.get("client_id")),
        hourly_rate=to_decimal(r.get("hourly_rate")),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ShiftSchedule]:
        rows = query_all(self._conn_factory, f"{_SELECT} ORDER BY shift_date DESC, start_time")
        return [_to_shift(r) for r in rows]

    def get_by_id(self, shift_id: str) -> Optional[ShiftSchedule]:
        r = query_one(self._conn_factory, f"{_SELECT} WHERE shift_id=%s", (shift_id,))
        return _to_shift(r) if r else None

    def list_for_client(self, client_id: str, *, shift_date: Optional[date] = None) -> Sequence[ShiftSchedule]:
        sql = f"{_SELECT} WHERE client_id=%s"
        params: list[Any] = [client_id]
        if shift_date is not None:
            sql += " AND shift_date=%s"
            params.append(shift_date)

        rows = query_all(self._conn_factory, sql + " ORDER BY shift_date DESC", params)
        return [_to_shift(r) for r in rows]
