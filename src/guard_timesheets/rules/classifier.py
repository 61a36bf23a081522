from __future__ import annotations

from typing import Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, TimeStatus
from ..shifts.model import ShiftSchedule
from .config import DEFAULT_RULE_CONFIG, RuleConfig
from .hours import compute_actual_hours, compute_scheduled_hours


class StatusClassifier:
    """Terminal classifier, evaluated top-down (first match wins).

    Recomputed from current field values on every call; no previous state
    is consulted.
    """

    def __init__(self, config: Optional[RuleConfig] = None):
        self._config = config or DEFAULT_RULE_CONFIG

    def classify(
        self,
        record: AttendanceRecord,
        schedule: ShiftSchedule,
        config: Optional[RuleConfig] = None,
    ) -> TimeStatus:
        cfg = config or self._config

        if record.check_in_time is None:
            return TimeStatus.PENDING
        if record.check_out_time is None:
            return TimeStatus.IN_PROGRESS
        if record.status == AttendanceStatus.NO_SHOW:
            return TimeStatus.NO_SHOW

        actual = compute_actual_hours(record.check_in_time, record.check_out_time)
        if actual is None:
            # checkout before checkin: needs manual correction
            return TimeStatus.PENDING

        scheduled = compute_scheduled_hours(schedule.start_time, schedule.end_time)
        if scheduled <= 0:
            return TimeStatus.COMPLETE
        if actual < scheduled * cfg.short_hours_ratio:
            return TimeStatus.SHORT
        if actual > scheduled * cfg.overtime_ratio:
            return TimeStatus.OVERTIME
        return TimeStatus.COMPLETE

    def is_disputed(
        self,
        record: AttendanceRecord,
        schedule: ShiftSchedule,
        config: Optional[RuleConfig] = None,
    ) -> bool:
        """Completed entry whose worked hours deviate from the schedule beyond the dispute ratio."""
        cfg = config or self._config
        actual = compute_actual_hours(record.check_in_time, record.check_out_time)
        if actual is None:
            return False
        scheduled = compute_scheduled_hours(schedule.start_time, schedule.end_time)
        return abs(actual - scheduled) > scheduled * cfg.dispute_ratio


def classify_status(
    record: AttendanceRecord,
    schedule: ShiftSchedule,
    config: Optional[RuleConfig] = None,
) -> TimeStatus:
    return StatusClassifier(config).classify(record, schedule)
