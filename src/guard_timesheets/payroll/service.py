from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..billing.config import DEFAULT_BILLING_CONFIG, BillingConfig
from ..common.numbers import round_hours, round_money
from ..core.constants import UNKNOWN_NAME
from ..directory.repository import DirectoryRepository
from ..rules.hours import compute_actual_hours, compute_scheduled_hours
from ..shifts.repository import ShiftRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import PayrollLine, PayrollReport, PayrollTotals

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class _GuardHours:
    worked: float = 0.0
    overtime: float = 0.0
    assignments: list[str] = field(default_factory=list)


class PayrollService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        shifts: ShiftRepository,
        directory: DirectoryRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        config: Optional[BillingConfig] = None,
    ):
        self._attendance = attendance
        self._shifts = shifts
        self._directory = directory
        self._config = config or DEFAULT_BILLING_CONFIG
        self._calculator = calculator or StandardPayrollCalculator(
            tax_percent=self._config.tax_percent,
            ni_percent=self._config.ni_percent,
        )

    def _hours_by_guard(self, *, start: date, end: date) -> dict[str, _GuardHours]:
        shifts = {s.shift_id: s for s in self._shifts.list_all()}
        by_guard: dict[str, _GuardHours] = {}

        for r in self._attendance.list_all():
            shift = shifts.get(r.shift_id)
            if not r.is_completed or shift is None or shift.shift_date is None:
                continue
            if not (start <= shift.shift_date <= end):
                continue

            actual = compute_actual_hours(r.check_in_time, r.check_out_time)
            if actual is None:
                logger.warning("assignment %s checks out before it checks in; left out of payroll", r.assignment_id)
                continue

            scheduled = compute_scheduled_hours(shift.start_time, shift.end_time)
            overtime = max(actual - scheduled, 0.0) if scheduled > 0 else 0.0

            h = by_guard.setdefault(r.guard_id, _GuardHours())
            h.worked += actual
            h.overtime += overtime
            h.assignments.append(r.assignment_id)
        return by_guard

    def build_payroll(self, *, start: date, end: date) -> PayrollReport:
        guards = {g.guard_id: g for g in self._directory.list_guards()}
        multiplier = self._config.overtime_multiplier

        lines: list[PayrollLine] = []
        for guard_id, h in self._hours_by_guard(start=start, end=end).items():
            guard = guards.get(guard_id)
            rate = guard.hourly_rate if guard and guard.hourly_rate else self._config.default_pay_rate
            regular_hours = round_hours(h.worked - h.overtime)
            overtime_hours = round_hours(h.overtime)

            lines.append(
                PayrollLine(
                    guard_id=guard_id,
                    name=guard.full_name if guard else UNKNOWN_NAME,
                    regular_hours=regular_hours,
                    overtime_hours=overtime_hours,
                    hourly_rate=rate,
                    overtime_rate=round_money(rate * multiplier),
                    pay=self._calculator.compute(regular_hours, overtime_hours, rate, multiplier),
                )
            )

        lines.sort(key=lambda x: x.name)
        return PayrollReport(lines=lines, totals=summarize(lines))


def summarize(lines: list[PayrollLine]) -> PayrollTotals:
    return PayrollTotals(
        total_gross=sum((x.pay.gross_pay for x in lines), ZERO),
        total_net=sum((x.pay.net_pay for x in lines), ZERO),
        total_tax=sum((x.pay.tax for x in lines), ZERO),
        total_ni=sum((x.pay.ni for x in lines), ZERO),
        total_hours=sum((x.regular_hours + x.overtime_hours for x in lines), ZERO),
    )
