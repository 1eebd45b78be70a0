"""
Time helpers.

All timestamps handled by the services are timezone-aware UTC datetimes. SQLite
hands back naive values for ``DateTime(timezone=True)`` columns, so anything read
from the database goes through ``ensure_utc`` before being compared.
"""

from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to a naive datetime, leave aware ones untouched."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
