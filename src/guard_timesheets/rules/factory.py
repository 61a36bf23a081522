from __future__ import annotations

from dataclasses import dataclass

from .checks.base import ViolationCheck
from .checks.break_check import BreakCheck
from .checks.early_leave_check import EarlyLeaveCheck
from .checks.lateness_check import LatenessCheck
from .checks.overtime_check import OvertimeCheck


@dataclass
class ViolationCheckFactory:
    """Factory Pattern: the ordered rule set (lateness, early leave, overtime, break)."""

    def ordered_checks(self) -> tuple[ViolationCheck, ...]:
        return (LatenessCheck(), EarlyLeaveCheck(), OvertimeCheck(), BreakCheck())
