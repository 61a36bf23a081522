from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import wall_clock
from ...core.enums import ViolationKind
from ..hours import whole_minutes
from ..model import RuleContext, Violation
from .base import ViolationCheck


class LatenessCheck(ViolationCheck):
    """Check-in later than the scheduled start plus the grace window."""

    def evaluate(self, ctx: RuleContext) -> Optional[Violation]:
        check_in = ctx.record.check_in_time
        if check_in is None or ctx.window is None:
            return None

        minutes = whole_minutes(wall_clock(check_in) - ctx.window[0])
        if minutes <= ctx.config.lateness_grace_minutes:
            return None
        return Violation(kind=ViolationKind.LATE, magnitude=minutes, message=f"Late by {minutes}m")
