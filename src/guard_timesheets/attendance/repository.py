from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus, TimesheetStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, assignment_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_shifts(self, shift_ids: Sequence[str]) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def admin_update_times(
        self,
        *,
        assignment_id: str,
        check_in_time: Optional[datetime],
        check_out_time: Optional[datetime],
        status: AttendanceStatus,
    ) -> bool:
        """Admin-only override of the clock events of one assignment."""

        raise NotImplementedError

    def set_timesheet_status(self, *, assignment_id: str, status: TimesheetStatus) -> bool:
        raise NotImplementedError
