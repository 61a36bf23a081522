from __future__ import annotations

from decimal import Decimal

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_optional_date
from ..common.http import json_api
from ..common.numbers import to_decimal
from ..common.validators import require_in_range
from ..core.exceptions import ValidationError
from ..container import Container
from .model import InvoiceLineItem
from .totals import item_amount


def _existing_items(raw) -> list[InvoiceLineItem]:
    """Manually entered items sent back by the invoice form."""
    items = []
    for x in raw or []:
        if not isinstance(x, dict):
            raise ValidationError("Invoice items must be objects", field_errors={"items": "invalid item"})
        quantity = to_decimal(x.get("quantity"), Decimal("0"))
        rate = to_decimal(x.get("rate"), Decimal("0"))
        items.append(
            InvoiceLineItem(
                description=str(x.get("description") or ""),
                quantity=quantity,
                rate=rate,
                amount=item_amount(quantity, rate),
                shift_id=x.get("shift_id"),
                assignment_id=x.get("assignment_id"),
            )
        )
    return items


def register(app: Flask, container: Container) -> None:
    service = container.invoice_service

    @app.route("/api/invoices/available-shifts", methods=["GET"], endpoint="invoices_available_shifts")
    @json_api
    def invoices_available_shifts():
        shifts = service.available_shifts(
            request.args.get("client_id") or "",
            shift_date=parse_optional_date(request.args.get("date")),
            search=request.args.get("search") or "",
        )
        out = []
        for s in shifts:
            cost = service.shift_cost(s.shift_id)
            out.append(
                {
                    "shift_id": s.shift_id,
                    "date": s.shift_date.isoformat() if s.shift_date else None,
                    "site_id": s.site_id,
                    "hours": float(cost.hours),
                    "cost": float(cost.cost),
                    "guard_count": cost.guard_count,
                }
            )
        return jsonify({"success": True, "shifts": out})

    @app.route("/api/invoices/preview", methods=["POST"], endpoint="invoices_preview")
    @json_api
    def invoices_preview():
        data = request.get_json(silent=True) or {}
        tax_rate = to_decimal(data.get("tax_rate"), container.billing_config.default_tax_rate_percent)
        require_in_range(float(tax_rate), "tax_rate", minimum=0, maximum=100)

        preview = service.preview(
            shift_ids=[str(x) for x in data.get("shift_ids") or []],
            tax_rate_percent=tax_rate,
            existing_items=_existing_items(data.get("items")),
        )
        return jsonify(
            {
                "success": True,
                "items": [x.to_dict() for x in preview.items],
                "totals": preview.totals.to_dict(),
                "imported": preview.imported_count,
            }
        )
