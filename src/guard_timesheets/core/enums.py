from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for authorization checks."""

    ADMIN = "admin"
    STAFF = "staff"
    GUARD = "guard"


class AttendanceStatus(str, Enum):
    """Stored assignment status."""

    ASSIGNED = "assigned"
    CHECKED_IN = "checked-in"
    COMPLETED = "completed"
    NO_SHOW = "no-show"


class TimesheetStatus(str, Enum):
    """Human review state of a timesheet, set by a reviewer."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class TimeStatus(str, Enum):
    """Computed attendance classification of one record against its shift."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    NO_SHOW = "no-show"
    SHORT = "short"
    OVERTIME = "overtime"
    COMPLETE = "complete"

    @property
    def label(self) -> str:
        return _TIME_STATUS_LABELS[self]


_TIME_STATUS_LABELS = {
    TimeStatus.PENDING: "Not Started",
    TimeStatus.IN_PROGRESS: "In Progress",
    TimeStatus.NO_SHOW: "No Show",
    TimeStatus.SHORT: "Short Hours",
    TimeStatus.OVERTIME: "Overtime",
    TimeStatus.COMPLETE: "Complete",
}


class ViolationKind(str, Enum):
    LATE = "late"
    EARLY_LEAVE = "early_leave"
    OVERTIME = "overtime"
    BREAK = "break"


class DateRange(str, Enum):
    """Time-tracking list windows, relative to 'today'."""

    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    ALL = "all"


class TimesheetView(str, Enum):
    ALL = "all"
    PENDING = "pending"
    APPROVED = "approved"
    DISPUTED = "disputed"


def enum_or(enum_cls, value, default):
    """Member of ``enum_cls`` for ``value``; ``default`` for missing or unknown values."""
    try:
        return enum_cls(value)
    except ValueError:
        return default
