from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus, TimesheetStatus, enum_or
from ..database.connection import DatabaseConnection
from ..database.mysql_base import execute, in_clause, query_all, query_one
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = (
    "SELECT assignment_id, shift_id, guard_id, check_in_time, check_out_time, "
    "break_minutes, status, timesheet_status FROM shift_assignments"
)


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        assignment_id=str(r["assignment_id"]),
        shift_id=str(r["shift_id"]),
        guard_id=str(r["guard_id"]),
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        break_minutes=int(r.get("break_minutes") or 0),
        status=enum_or(AttendanceStatus, r.get("status"), AttendanceStatus.ASSIGNED),
        timesheet_status=enum_or(TimesheetStatus, r.get("timesheet_status"), TimesheetStatus.PENDING),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [_to_record(r) for r in query_all(self._conn_factory, _SELECT)]

    def get_by_id(self, assignment_id: str) -> Optional[AttendanceRecord]:
        r = query_one(self._conn_factory, f"{_SELECT} WHERE assignment_id=%s", (assignment_id,))
        return _to_record(r) if r else None

    def list_for_shifts(self, shift_ids: Sequence[str]) -> Sequence[AttendanceRecord]:
        if not shift_ids:
            return []
        rows = query_all(self._conn_factory, f"{_SELECT} WHERE shift_id IN ({in_clause(shift_ids)})", shift_ids)
        return [_to_record(r) for r in rows]

    def admin_update_times(
        self,
        *,
        assignment_id: str,
        check_in_time: Optional[datetime],
        check_out_time: Optional[datetime],
        status: AttendanceStatus,
    ) -> bool:
        updated = execute(
            self._conn_factory,
            """
            UPDATE shift_assignments
            SET check_in_time=%s, check_out_time=%s, status=%s
            WHERE assignment_id=%s
            """,
            (check_in_time, check_out_time, status.value, assignment_id),
        )
        return updated > 0

    def set_timesheet_status(self, *, assignment_id: str, status: TimesheetStatus) -> bool:
        updated = execute(
            self._conn_factory,
            "UPDATE shift_assignments SET timesheet_status=%s WHERE assignment_id=%s",
            (status.value, assignment_id),
        )
        return updated > 0
