from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import ShiftSchedule


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[ShiftSchedule]:
        raise NotImplementedError

    def get_by_id(self, shift_id: str) -> Optional[ShiftSchedule]:
        raise NotImplementedError

    def list_for_client(self, client_id: str, *, shift_date: Optional[date] = None) -> Sequence[ShiftSchedule]:
        raise NotImplementedError
