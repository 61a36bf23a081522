from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_timestamp
from ..common.numbers import parse_number
from ..core.enums import AttendanceStatus, TimesheetStatus, enum_or


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one guard's actual presence against one shift (an assignment).

    Missing clock events are ``None``, never empty strings.
    """

    assignment_id: str
    shift_id: str
    guard_id: str
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    break_minutes: int = 0
    status: AttendanceStatus = AttendanceStatus.ASSIGNED
    timesheet_status: TimesheetStatus = TimesheetStatus.PENDING

    @property
    def is_completed(self) -> bool:
        return self.check_in_time is not None and self.check_out_time is not None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "AttendanceRecord":
        return cls(
            assignment_id=str(doc.get("$id") or doc.get("id") or ""),
            shift_id=str(doc.get("shiftId") or ""),
            guard_id=str(doc.get("guardId") or ""),
            check_in_time=parse_timestamp(doc.get("checkInTime")),
            check_out_time=parse_timestamp(doc.get("checkOutTime")),
            break_minutes=max(int(parse_number(doc.get("breakMinutes"))), 0),
            status=enum_or(AttendanceStatus, doc.get("status"), AttendanceStatus.ASSIGNED),
            timesheet_status=enum_or(TimesheetStatus, doc.get("timesheetStatus"), TimesheetStatus.PENDING),
        )
