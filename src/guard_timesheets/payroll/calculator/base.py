from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import PayBreakdown


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, regular_hours, overtime_hours, hourly_rate, overtime_multiplier) -> PayBreakdown:
        raise NotImplementedError
