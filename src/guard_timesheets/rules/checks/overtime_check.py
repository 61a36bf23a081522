from __future__ import annotations

from typing import Optional

from ...core.enums import ViolationKind
from ..hours import has_schedule_times
from ..model import RuleContext, Violation
from .base import ViolationCheck


class OvertimeCheck(ViolationCheck):
    """Worked hours beyond the schedule (plus slack) or beyond the absolute threshold.

    The two limits are independent. The schedule limit needs usable shift
    times; the absolute threshold applies to every completed record. When
    only the threshold trips, the reported hours are those beyond it.
    """

    def evaluate(self, ctx: RuleContext) -> Optional[Violation]:
        actual = ctx.actual_hours
        if actual is None:
            return None

        cfg = ctx.config
        if has_schedule_times(ctx.schedule) and actual > ctx.scheduled_hours + cfg.overtime_slack_hours:
            extra = actual - ctx.scheduled_hours
        elif actual > cfg.overtime_threshold_hours:
            extra = actual - cfg.overtime_threshold_hours
        else:
            return None

        extra = round(extra, 2)
        return Violation(kind=ViolationKind.OVERTIME, magnitude=extra, message=f"Overtime {extra:.2f}h")
