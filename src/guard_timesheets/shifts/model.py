from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_optional_date
from ..common.numbers import to_decimal


@dataclass(frozen=True)
class ShiftSchedule:
    """Domain entity: a planned work window at a site for a client.

    ``start_time``/``end_time`` are local "HH:MM" wall-clock strings with no
    timezone. An end earlier than the start means the shift runs past midnight.
    """

    shift_id: str
    shift_date: Optional[date]
    start_time: Optional[str]
    end_time: Optional[str]
    site_id: Optional[str] = None
    client_id: Optional[str] = None
    hourly_rate: Optional[Decimal] = None

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "ShiftSchedule":
        return cls(
            shift_id=str(doc.get("$id") or doc.get("id") or ""),
            shift_date=parse_optional_date(doc.get("date") or doc.get("shiftDate")),
            start_time=doc.get("startTime") or None,
            end_time=doc.get("endTime") or None,
            site_id=doc.get("siteId") or None,
            client_id=doc.get("clientId") or None,
            hourly_rate=to_decimal(doc.get("hourlyRate")),
        )
