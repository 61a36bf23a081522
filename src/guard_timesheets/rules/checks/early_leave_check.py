from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import wall_clock
from ...core.enums import ViolationKind
from ..hours import whole_minutes
from ..model import RuleContext, Violation
from .base import ViolationCheck


class EarlyLeaveCheck(ViolationCheck):
    """Check-out before the scheduled end minus the grace window."""

    def evaluate(self, ctx: RuleContext) -> Optional[Violation]:
        check_out = ctx.record.check_out_time
        if check_out is None or ctx.window is None:
            return None

        minutes = whole_minutes(ctx.window[1] - wall_clock(check_out))
        if minutes <= ctx.config.early_grace_minutes:
            return None
        return Violation(kind=ViolationKind.EARLY_LEAVE, magnitude=minutes, message=f"Left early by {minutes}m")
