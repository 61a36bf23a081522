from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class InvoiceLineItem:
    """One billable unit: worked hours x rate. Derived, never mutated."""

    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal
    shift_id: Optional[str] = None
    assignment_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "quantity": float(self.quantity),
            "rate": float(self.rate),
            "amount": float(self.amount),
            "shift_id": self.shift_id,
            "assignment_id": self.assignment_id,
        }


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    tax_amount: Decimal
    total: Decimal

    def to_dict(self) -> dict[str, float]:
        return {"subtotal": float(self.subtotal), "tax_amount": float(self.tax_amount), "total": float(self.total)}


@dataclass(frozen=True)
class InvoiceDraft:
    """Invoice form values as submitted, prior to saving."""

    invoice_number: str
    client_id: Optional[str]
    invoice_date: Optional[date]
    due_date: Optional[date]
    items: Sequence[InvoiceLineItem]
    tax_rate_percent: Decimal


@dataclass(frozen=True)
class ShiftCostSummary:
    hours: Decimal
    cost: Decimal
    guard_count: int
