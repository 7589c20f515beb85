# File: calendar_layout/models/common.py

from datetime import datetime, date, time
from typing import Any, Optional

import pytz

def parse_iso_datetime(value: Any) -> Optional[datetime]:
    """Robustly parse ISO date strings with 'Z' or offsets, or pass datetimes through."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        return None

    date_str = value.strip()
    try:
        # specific fix for Python < 3.11 which doesn't handle 'Z' natively in fromisoformat
        clean_str = date_str.replace('Z', '+00:00')
        return datetime.fromisoformat(clean_str)
    except ValueError:
        # Fallback for simple date strings without time
        try:
            return datetime.strptime(date_str, "%Y-%m-%d")
        except ValueError:
            return None


def to_wall_clock(dt: datetime, timezone: Optional[str] = None) -> datetime:
    """
    Express a datetime as naive local wall-clock time.

    Aware values are converted to `timezone` first (when given) and then
    stripped of tzinfo. Naive values are assumed to be local already.
    """
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=None)
    if timezone:
        dt = dt.astimezone(pytz.timezone(timezone))
    return dt.replace(tzinfo=None)
