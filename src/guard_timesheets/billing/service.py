from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import NotFoundError, ValidationError
from ..directory.names import NameDirectory
from ..directory.repository import DirectoryRepository
from ..shifts.model import ShiftSchedule
from ..shifts.repository import ShiftRepository
from .config import DEFAULT_BILLING_CONFIG, BillingConfig
from .deriver import DESCRIPTION_DATE_FORMAT, BillingDeriver, group_by_shift
from .model import InvoiceLineItem, InvoiceTotals, ShiftCostSummary
from .totals import aggregate_totals

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class InvoicePreview:
    items: list[InvoiceLineItem]
    totals: InvoiceTotals
    imported_count: int


class InvoiceService:
    def __init__(
        self,
        shifts: ShiftRepository,
        attendance: AttendanceRepository,
        directory: DirectoryRepository,
        *,
        config: Optional[BillingConfig] = None,
    ):
        self._shifts = shifts
        self._attendance = attendance
        self._directory = directory
        self._config = config or DEFAULT_BILLING_CONFIG

    def _deriver(self) -> BillingDeriver:
        names = NameDirectory.build(guards=self._directory.list_guards(), sites=self._directory.list_sites())
        return BillingDeriver(names, config=self._config)

    def available_shifts(
        self,
        client_id: str,
        *,
        shift_date: Optional[date] = None,
        search: str = "",
    ) -> list[ShiftSchedule]:
        """Client shifts with at least one completed assignment, newest first."""
        if not client_id:
            raise ValidationError("Please select a client first", field_errors={"client_id": "required"})

        shifts = list(self._shifts.list_for_client(client_id, shift_date=shift_date))
        completed = {r.shift_id for r in self._attendance.list_for_shifts([s.shift_id for s in shifts]) if r.is_completed}
        sites = {s.site_id: s.site_name.lower() for s in self._directory.list_sites()}

        term = search.strip().lower()
        out = []
        for s in shifts:
            if s.shift_id not in completed:
                continue
            if term:
                date_text = s.shift_date.strftime(DESCRIPTION_DATE_FORMAT) if s.shift_date else ""
                if term not in sites.get(s.site_id, "") and term not in date_text:
                    continue
            out.append(s)

        out.sort(key=lambda s: s.shift_date or date.min, reverse=True)
        return out

    def shift_cost(self, shift_id: str) -> ShiftCostSummary:
        shift = self._shifts.get_by_id(shift_id)
        if shift is None:
            raise NotFoundError("Shift not found")

        completed = [r for r in self._attendance.list_for_shifts([shift_id]) if r.is_completed]
        # same per-assignment rounding as the imported line items
        items = self._deriver().derive_line_items([shift], {shift_id: completed})
        return ShiftCostSummary(
            hours=sum((x.quantity for x in items), ZERO),
            cost=sum((x.amount for x in items), ZERO),
            guard_count=len(completed),
        )

    def preview(
        self,
        *,
        shift_ids: Sequence[str],
        tax_rate_percent=None,
        default_rate=None,
        existing_items: Sequence[InvoiceLineItem] = (),
    ) -> InvoicePreview:
        """Existing items plus one item per completed assignment of the selected shifts."""
        shifts = []
        for shift_id in shift_ids:
            shift = self._shifts.get_by_id(shift_id)
            if shift is None:
                logger.debug("shift %s no longer exists; not imported", shift_id)
                continue
            shifts.append(shift)

        assignments = group_by_shift(list(self._attendance.list_for_shifts([s.shift_id for s in shifts])))
        new_items = self._deriver().derive_line_items(shifts, assignments, default_rate)
        items = [*existing_items, *new_items]

        tax_rate = self._config.default_tax_rate_percent if tax_rate_percent is None else tax_rate_percent
        logger.info("imported %d invoice items from %d shifts", len(new_items), len(shifts))
        return InvoicePreview(items=items, totals=aggregate_totals(items, tax_rate), imported_count=len(new_items))
