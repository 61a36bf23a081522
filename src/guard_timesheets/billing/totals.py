from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable

from ..common.numbers import round_money, to_decimal
from .model import InvoiceTotals

ZERO = Decimal("0")


def item_amount(quantity, rate) -> Decimal:
    """Amount for a manually entered item; unparsable inputs count as 0."""
    return round_money(to_decimal(quantity, ZERO) * to_decimal(rate, ZERO))


def _amount_of(item: Any) -> Decimal:
    if isinstance(item, dict):
        value = item.get("amount")
    else:
        value = getattr(item, "amount", None)
    return to_decimal(value, ZERO)


def aggregate_totals(line_items: Iterable[Any], tax_rate_percent) -> InvoiceTotals:
    """Subtotal, tax and total, recomputed in full from the item amounts.

    The subtotal sums the already-rounded per-item amounts; hours are never
    re-derived here.
    """
    subtotal = round_money(sum((_amount_of(item) for item in line_items), ZERO))
    rate = to_decimal(tax_rate_percent, ZERO)
    tax_amount = round_money(subtotal * rate / Decimal(100))
    return InvoiceTotals(subtotal=subtotal, tax_amount=tax_amount, total=subtotal + tax_amount)
