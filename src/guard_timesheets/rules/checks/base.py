from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import RuleContext, Violation


class ViolationCheck(ABC):
    """Strategy Pattern: one independent timesheet rule."""

    @abstractmethod
    def evaluate(self, ctx: RuleContext) -> Optional[Violation]:
        raise NotImplementedError
