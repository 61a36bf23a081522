from __future__ import annotations

from typing import Optional

from ...core.enums import ViolationKind
from ..model import RuleContext, Violation
from .base import ViolationCheck


class BreakCheck(ViolationCheck):
    """Long shifts need a minimum break."""

    def evaluate(self, ctx: RuleContext) -> Optional[Violation]:
        actual = ctx.actual_hours
        cfg = ctx.config
        if actual is None or actual < cfg.break_min_hours:
            return None

        taken = ctx.record.break_minutes
        required = cfg.break_minutes_required
        if taken >= required:
            return None
        return Violation(
            kind=ViolationKind.BREAK,
            magnitude=required - taken,
            message=f"Break short/missing ({taken}/{required}m)",
        )
