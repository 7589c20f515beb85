# File: calendar_layout/processors/day_bucketer.py
"""
Groups normalized events by the calendar date they start on.
"""

import datetime
from collections import defaultdict
from typing import Dict, List, Union

from calendar_layout.models import NormalizedEvent, DAY_KEY_FORMAT
from calendar_layout.utils.logger import setup_logger

logger = setup_logger(__name__)


def day_key(moment: Union[datetime.date, datetime.datetime]) -> str:
    """Canonical 'YYYY-MM-DD' key for a date or datetime."""
    return moment.strftime(DAY_KEY_FORMAT)


def parse_day_key(key: str) -> datetime.date:
    """Inverse of day_key."""
    try:
        return datetime.datetime.strptime(key, DAY_KEY_FORMAT).date()
    except (TypeError, ValueError):
        raise ValueError(f"Invalid day key (expected YYYY-MM-DD): {key!r}")


def sort_by_start(events: List[NormalizedEvent]) -> List[NormalizedEvent]:
    """Stable sort on start; equal starts keep their input order."""
    return sorted(events, key=lambda e: e.start)


def bucket_by_day(events: List[NormalizedEvent]) -> Dict[str, List[NormalizedEvent]]:
    """
    Group events by the day their start falls on.

    A multi-day event is placed only in its start day's bucket. Buckets are
    returned in ascending date order, each sorted by start.
    """
    buckets: Dict[str, List[NormalizedEvent]] = defaultdict(list)
    for event in events:
        buckets[day_key(event.start)].append(event)

    logger.debug(f"Bucketed {len(events)} events into {len(buckets)} days")
    return {key: sort_by_start(buckets[key]) for key in sorted(buckets)}


def events_for_day(events: List[NormalizedEvent], key: str) -> List[NormalizedEvent]:
    """Events starting on the given day, sorted by start."""
    return sort_by_start([e for e in events if day_key(e.start) == key])
