from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional, Union

TimestampLike = Union[datetime, str, None]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value) -> Optional[date]:
    """Lenient date parse for store documents: None on anything unusable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return parse_iso_date(text[:10])
    except ValueError:
        return None


def parse_wall_clock(value) -> Optional[int]:
    """Minutes since midnight for an "HH:MM" (or "HH:MM:SS") wall-clock value.

    Returns None when the value is missing or unparsable.
    """
    if value is None:
        return None
    if isinstance(value, time):
        return value.hour * 60 + value.minute

    parts = str(value).strip().split(":")
    if len(parts) < 2:
        return None
    try:
        hours = int(parts[0])
        minutes = int(parts[1])
    except ValueError:
        return None
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return None
    return hours * 60 + minutes


def parse_timestamp(value: TimestampLike) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp; None when missing or malformed."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value

    text = str(value).strip()
    if not text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def wall_clock(value: datetime) -> datetime:
    """The naive wall-clock reading of a timestamp (tzinfo dropped, no conversion)."""
    return value.replace(tzinfo=None)


def format_iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
