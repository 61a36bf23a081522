from __future__ import annotations

import logging
from decimal import Decimal
from typing import Mapping, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.numbers import round_hours, round_money, to_decimal
from ..core.constants import NOT_AVAILABLE
from ..directory.names import NameDirectory
from ..rules.hours import compute_actual_hours
from ..shifts.model import ShiftSchedule
from .config import DEFAULT_BILLING_CONFIG, BillingConfig
from .model import InvoiceLineItem

logger = logging.getLogger(__name__)

DESCRIPTION_DATE_FORMAT = "%d/%m/%Y"


class BillingDeriver:
    """Turns selected shifts and their attendance into invoice line items.

    Inputs are never mutated; the same inputs always give equal output.
    """

    def __init__(self, names: Optional[NameDirectory] = None, *, config: Optional[BillingConfig] = None):
        self._names = names or NameDirectory()
        self._config = config or DEFAULT_BILLING_CONFIG

    def rate_for(self, shift: ShiftSchedule, default_rate=None) -> Decimal:
        if shift.hourly_rate is not None and shift.hourly_rate > 0:
            return shift.hourly_rate
        return to_decimal(default_rate, self._config.default_hourly_rate)

    def describe(self, shift: ShiftSchedule, record: AttendanceRecord) -> str:
        shift_date = shift.shift_date.strftime(DESCRIPTION_DATE_FORMAT) if shift.shift_date else NOT_AVAILABLE
        return f"{self._names.guard_name(record.guard_id)} - {self._names.site_name(shift.site_id)} ({shift_date})"

    def derive_line_items(
        self,
        shifts: Sequence[ShiftSchedule],
        assignments_by_shift: Mapping[str, Sequence[AttendanceRecord]],
        default_rate=None,
    ) -> list[InvoiceLineItem]:
        items: list[InvoiceLineItem] = []
        for shift in shifts:
            rate = self.rate_for(shift, default_rate)
            for record in assignments_by_shift.get(shift.shift_id, ()):
                if not record.is_completed:
                    continue
                hours = compute_actual_hours(record.check_in_time, record.check_out_time)
                quantity = round_hours(hours) if hours is not None else None
                if quantity is None or quantity <= 0:
                    logger.debug("assignment %s has no billable hours; skipped", record.assignment_id)
                    continue

                items.append(
                    InvoiceLineItem(
                        description=self.describe(shift, record),
                        quantity=quantity,
                        rate=rate,
                        amount=round_money(quantity * rate),
                        shift_id=shift.shift_id,
                        assignment_id=record.assignment_id,
                    )
                )
        return items


def group_by_shift(records: Sequence[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    grouped: dict[str, list[AttendanceRecord]] = {}
    for r in records:
        grouped.setdefault(r.shift_id, []).append(r)
    return grouped


def derive_line_items(
    shifts: Sequence[ShiftSchedule],
    assignments_by_shift: Mapping[str, Sequence[AttendanceRecord]],
    default_rate=None,
    *,
    names: Optional[NameDirectory] = None,
) -> list[InvoiceLineItem]:
    return BillingDeriver(names).derive_line_items(shifts, assignments_by_shift, default_rate)
