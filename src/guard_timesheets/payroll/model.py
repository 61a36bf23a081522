from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class PayBreakdown:
    regular_pay: Decimal
    overtime_pay: Decimal
    gross_pay: Decimal
    tax: Decimal
    ni: Decimal
    net_pay: Decimal


@dataclass(frozen=True)
class PayrollLine:
    guard_id: str
    name: str
    regular_hours: Decimal
    overtime_hours: Decimal
    hourly_rate: Decimal
    overtime_rate: Decimal
    pay: PayBreakdown

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"guard_id": self.guard_id, "name": self.name}
        for key in ("regular_hours", "overtime_hours", "hourly_rate", "overtime_rate"):
            out[key] = float(getattr(self, key))
        out.update({k: float(v) for k, v in asdict(self.pay).items()})
        return out


@dataclass(frozen=True)
class PayrollTotals:
    total_gross: Decimal
    total_net: Decimal
    total_tax: Decimal
    total_ni: Decimal
    total_hours: Decimal


@dataclass(frozen=True)
class PayrollReport:
    lines: list[PayrollLine]
    totals: PayrollTotals
