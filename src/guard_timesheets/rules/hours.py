from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from ..common.datetime_utils import TimestampLike, parse_timestamp, parse_wall_clock, wall_clock
from ..shifts.model import ShiftSchedule

MINUTES_PER_DAY = 24 * 60


def compute_scheduled_hours(start_time, end_time) -> float:
    """Wall-clock length of a shift in hours.

    0.0 when either side is missing or unparsable. An end earlier than the
    start is taken on the following day, so the result is never negative.
    """
    start = parse_wall_clock(start_time)
    end = parse_wall_clock(end_time)
    if start is None or end is None:
        return 0.0

    minutes = end - start
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes / 60


def compute_actual_hours(check_in_time: TimestampLike, check_out_time: TimestampLike) -> Optional[float]:
    """Worked hours between two clock events at full precision.

    None ("unavailable") when either event is missing or malformed, or when
    the check-out precedes the check-in.
    """
    check_in = parse_timestamp(check_in_time)
    check_out = parse_timestamp(check_out_time)
    if check_in is None or check_out is None:
        return None

    if (check_in.tzinfo is None) != (check_out.tzinfo is None):
        check_in, check_out = wall_clock(check_in), wall_clock(check_out)

    delta = check_out - check_in
    if delta < timedelta(0):
        return None
    return delta.total_seconds() / 3600


def has_schedule_times(schedule: ShiftSchedule) -> bool:
    return parse_wall_clock(schedule.start_time) is not None and parse_wall_clock(schedule.end_time) is not None


def scheduled_window(
    schedule: ShiftSchedule,
    *,
    fallback_date: Optional[date] = None,
) -> Optional[tuple[datetime, datetime]]:
    """Naive (start, end) datetimes of a shift, or None when it cannot be placed.

    ``fallback_date`` anchors shifts stored without a date.
    """
    start = parse_wall_clock(schedule.start_time)
    end = parse_wall_clock(schedule.end_time)
    day = schedule.shift_date or fallback_date
    if start is None or end is None or day is None:
        return None

    start_dt = datetime.combine(day, time(start // 60, start % 60))
    end_dt = datetime.combine(day, time(end // 60, end % 60))
    if end_dt < start_dt:
        end_dt += timedelta(days=1)
    return start_dt, end_dt


def whole_minutes(delta: timedelta) -> int:
    return int(delta.total_seconds() // 60)
