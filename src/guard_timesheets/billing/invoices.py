from __future__ import annotations

from decimal import Decimal

from ..core.constants import INVOICE_NUMBER_PREFIX
from ..core.exceptions import ValidationError
from .model import InvoiceDraft
from .totals import aggregate_totals


def generate_invoice_number(year: int, existing_count: int, *, prefix: str = INVOICE_NUMBER_PREFIX) -> str:
    """Sequential number such as ``INV-2025-001``."""
    return f"{prefix}-{int(year)}-{int(existing_count) + 1:03d}"


def validate_invoice(draft: InvoiceDraft) -> None:
    errors: dict[str, str] = {}

    if not (draft.invoice_number or "").strip():
        errors["invoice_number"] = "Invoice number is required"
    if not draft.client_id:
        errors["client_id"] = "Please select a client"
    if draft.invoice_date is None:
        errors["invoice_date"] = "Invoice date is required"

    if draft.due_date is None:
        errors["due_date"] = "Due date is required"
    elif draft.invoice_date is not None and draft.due_date <= draft.invoice_date:
        errors["due_date"] = "Due date must be after invoice date"

    if not draft.items:
        errors["items"] = "At least one invoice item is required"

    if draft.tax_rate_percent < 0 or draft.tax_rate_percent > 100:
        errors["tax_rate_percent"] = "Tax rate must be between 0 and 100%"

    if aggregate_totals(draft.items, draft.tax_rate_percent).total <= Decimal("0"):
        errors["total"] = "Invoice total must be greater than zero"

    if errors:
        raise ValidationError("Invoice is invalid", field_errors=errors)
