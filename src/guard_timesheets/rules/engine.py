from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import wall_clock
from ..shifts.model import ShiftSchedule
from .checks.base import ViolationCheck
from .config import DEFAULT_RULE_CONFIG, RuleConfig
from .factory import ViolationCheckFactory
from .hours import compute_actual_hours, compute_scheduled_hours, scheduled_window
from .model import RuleContext, Violation

logger = logging.getLogger(__name__)


def build_context(record: AttendanceRecord, schedule: ShiftSchedule, config: RuleConfig) -> RuleContext:
    anchor = record.check_in_time or record.check_out_time
    fallback_date = wall_clock(anchor).date() if anchor is not None else None
    return RuleContext(
        record=record,
        schedule=schedule,
        config=config,
        window=scheduled_window(schedule, fallback_date=fallback_date),
        scheduled_hours=compute_scheduled_hours(schedule.start_time, schedule.end_time),
        actual_hours=compute_actual_hours(record.check_in_time, record.check_out_time),
    )


class RuleEngine:
    """Classifies attendance against its shift and reports rule violations.

    Stateless: every call derives its result from the arguments only.
    """

    def __init__(
        self,
        config: Optional[RuleConfig] = None,
        *,
        checks: Optional[Sequence[ViolationCheck]] = None,
    ):
        self._config = config or DEFAULT_RULE_CONFIG
        self._checks = tuple(checks) if checks is not None else ViolationCheckFactory().ordered_checks()

    @property
    def config(self) -> RuleConfig:
        return self._config

    def detect_violations(
        self,
        record: AttendanceRecord,
        schedule: ShiftSchedule,
        config: Optional[RuleConfig] = None,
    ) -> list[Violation]:
        ctx = build_context(record, schedule, config or self._config)
        if ctx.window is None and record.check_in_time is not None:
            logger.debug("shift %s has no usable window; timing checks skipped", schedule.shift_id)

        violations: list[Violation] = []
        for check in self._checks:
            violation = check.evaluate(ctx)
            if violation is not None:
                violations.append(violation)
        return violations


def detect_violations(
    record: AttendanceRecord,
    schedule: ShiftSchedule,
    config: Optional[RuleConfig] = None,
) -> list[Violation]:
    return RuleEngine(config).detect_violations(record, schedule)
