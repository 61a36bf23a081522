from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...billing.config import DEFAULT_BILLING_CONFIG
from ...common.numbers import round_money, to_decimal
from ..model import PayBreakdown
from .base import PayrollCalculator

ZERO = Decimal("0")


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: gross = regular + overtime x multiplier, flat tax and NI deductions.

    No bands or thresholds. Unparsable inputs count as 0.
    """

    def __init__(self, *, tax_percent=None, ni_percent=None):
        self._tax_percent = to_decimal(tax_percent, DEFAULT_BILLING_CONFIG.tax_percent)
        self._ni_percent = to_decimal(ni_percent, DEFAULT_BILLING_CONFIG.ni_percent)

    def compute(self, regular_hours, overtime_hours, hourly_rate, overtime_multiplier) -> PayBreakdown:
        rate = to_decimal(hourly_rate, ZERO)
        regular_pay = round_money(to_decimal(regular_hours, ZERO) * rate)
        overtime_pay = round_money(to_decimal(overtime_hours, ZERO) * rate * to_decimal(overtime_multiplier, ZERO))
        gross_pay = regular_pay + overtime_pay
        tax = round_money(gross_pay * self._tax_percent)
        ni = round_money(gross_pay * self._ni_percent)
        return PayBreakdown(
            regular_pay=regular_pay,
            overtime_pay=overtime_pay,
            gross_pay=gross_pay,
            tax=tax,
            ni=ni,
            net_pay=gross_pay - tax - ni,
        )


def compute_payroll_gross(
    regular_hours,
    overtime_hours,
    hourly_rate,
    overtime_multiplier,
    *,
    tax_percent: Optional[Decimal] = None,
    ni_percent: Optional[Decimal] = None,
) -> PayBreakdown:
    calculator = StandardPayrollCalculator(tax_percent=tax_percent, ni_percent=ni_percent)
    return calculator.compute(regular_hours, overtime_hours, hourly_rate, overtime_multiplier)
