from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import timedelta
from typing import Any, Dict, Iterator, List, Optional, Sequence

from ..common.datetime_utils import parse_wall_clock
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)

Row = Dict[str, Any]

_DAY_MINUTES = 24 * 60


@contextmanager
def db_cursor(conn_factory: DatabaseConnection) -> Iterator[Any]:
    """Dictionary cursor inside one transaction; committed on success, rolled back on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=True)
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def query_all(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> List[Row]:
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return list(cur.fetchall() or [])


def query_one(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> Optional[Row]:
    rows = query_all(conn_factory, sql, params)
    return rows[0] if rows else None


def execute(conn_factory: DatabaseConnection, sql: str, params: Sequence[Any] = ()) -> int:
    """Run a write statement; returns the affected row count."""
    with db_cursor(conn_factory) as cur:
        cur.execute(sql, tuple(params))
        return cur.rowcount


def in_clause(values: Sequence[Any]) -> str:
    """Placeholder list for ``IN (...)``; callers must pass at least one value."""
    return ", ".join(["%s"] * len(values))


def mysql_wall_clock(value: Any) -> Optional[str]:
    """A TIME column as an "HH:MM" string.

    mysql-connector returns TIME as ``timedelta``; ``time`` objects and text
    are accepted as well.
    """
    if value is None:
        return None
    if isinstance(value, timedelta):
        minutes = int(value.total_seconds()) // 60 % _DAY_MINUTES
    else:
        minutes = parse_wall_clock(value)
        if minutes is None:
            logger.warning("unreadable TIME value %r treated as missing", value)
            return None
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
