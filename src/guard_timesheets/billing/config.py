from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.numbers import to_decimal
from ..core import constants


def _d(value: float) -> Decimal:
    return to_decimal(value)


@dataclass(frozen=True)
class BillingConfig:
    """Named defaults for invoice and payroll derivation."""

    default_hourly_rate: Decimal = _d(constants.DEFAULT_HOURLY_RATE)
    default_pay_rate: Decimal = _d(constants.DEFAULT_PAY_RATE)
    default_tax_rate_percent: Decimal = _d(constants.DEFAULT_TAX_RATE_PERCENT)
    overtime_multiplier: Decimal = _d(constants.DEFAULT_OVERTIME_MULTIPLIER)
    tax_percent: Decimal = _d(constants.DEFAULT_INCOME_TAX_PERCENT)
    ni_percent: Decimal = _d(constants.DEFAULT_NI_PERCENT)
    invoice_prefix: str = constants.INVOICE_NUMBER_PREFIX
    currency_symbol: str = constants.CURRENCY_SYMBOL

    @classmethod
    def from_mapping(cls, values: Optional[Mapping[str, Any]]) -> "BillingConfig":
        values = values or {}
        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in values:
                continue
            if isinstance(f.default, Decimal):
                kwargs[f.name] = to_decimal(values[f.name], f.default)
            else:
                kwargs[f.name] = str(values[f.name])
        return cls(**kwargs)


DEFAULT_BILLING_CONFIG = BillingConfig()
