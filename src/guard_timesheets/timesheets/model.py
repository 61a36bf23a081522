from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import DateRange, TimeStatus, TimesheetView
from ..rules.model import Violation
from ..shifts.model import ShiftSchedule


@dataclass(frozen=True)
class TimesheetEntry:
    """Read-model for the time-tracking table: one assignment joined with its shift."""

    record: AttendanceRecord
    shift: ShiftSchedule
    guard_name: str
    client_name: str
    site_name: str
    status: TimeStatus
    scheduled_hours: float
    actual_hours: Optional[float]
    violations: tuple[Violation, ...]
    disputed: bool


@dataclass(frozen=True)
class TimesheetFilters:
    date_range: DateRange = DateRange.WEEK
    guard_id: Optional[str] = None
    client_id: Optional[str] = None
    view: TimesheetView = TimesheetView.ALL
    search: str = ""


@dataclass(frozen=True)
class TimesheetStats:
    total_entries: int
    completed: int
    in_progress: int
    pending: int
    total_hours: float
    overtime_hours: float
