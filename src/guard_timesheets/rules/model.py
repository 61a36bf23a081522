from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import ViolationKind
from ..shifts.model import ShiftSchedule
from .config import RuleConfig


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    magnitude: float
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class RuleContext:
    """Values derived once per record and shared by every check."""

    record: AttendanceRecord
    schedule: ShiftSchedule
    config: RuleConfig
    window: Optional[tuple[datetime, datetime]]
    scheduled_hours: float
    actual_hours: Optional[float]
