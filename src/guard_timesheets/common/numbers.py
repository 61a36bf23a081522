from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from ..core.constants import CURRENCY_SYMBOL

CENT = Decimal("0.01")


def parse_number(value, default: float = 0.0) -> float:
    """Float from loosely-typed input; ``default`` for missing, blank or non-finite values."""
    if value is None or value == "":
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(parsed):
        return default
    return parsed


def to_decimal(value, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """Decimal from loosely-typed input; ``default`` when it cannot be represented."""
    if value is None or value == "":
        return default
    if isinstance(value, Decimal):
        return value if value.is_finite() else default
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        # repr keeps the shortest round-tripping form (25.5 -> "25.5")
        value = repr(value)
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    return parsed if parsed.is_finite() else default


def round_money(value: Decimal) -> Decimal:
    """Round half-up to 2 decimal places."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def round_hours(hours: float) -> Decimal:
    return round_money(to_decimal(hours, Decimal("0")))


def format_currency(value, currency: str = CURRENCY_SYMBOL) -> str:
    amount = round_money(to_decimal(value, Decimal("0")))
    return f"{currency}{amount:.2f}"


def format_hours(decimal_hours) -> str:
    """Render decimal hours as "7h 55m"."""
    hours = round(parse_number(decimal_hours), 2)
    if hours <= 0:
        return "0h"

    whole = int(hours)
    minutes = int(round((hours - whole) * 60))
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if minutes == 0:
        return f"{whole}h"
    return f"{whole}h {minutes}m"
