"""Clock utilities for record timestamps."""

from datetime import datetime
from typing import Optional

import pytz

DEFAULT_TZ = pytz.utc


def get_zone(name: str) -> pytz.BaseTzInfo:
    """Resolve a zone name (e.g. "UTC", "Asia/Shanghai")."""
    return pytz.timezone(name)


def now(tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """Return the current time in ``tz`` (UTC by default)."""
    return datetime.now(tz or DEFAULT_TZ)


def localize(dt: datetime, tz: Optional[pytz.BaseTzInfo] = None) -> datetime:
    """
    Attach a timezone to a datetime.

    Naive datetimes are assumed to be in ``tz``; aware ones are converted.
    """
    tz = tz or DEFAULT_TZ
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)
