# File: calendar_layout/processors/multi_day_clamp.py
"""
Keeps events that run past midnight inside their owning day's window.
"""

import datetime

from calendar_layout.models import NormalizedEvent, RenderWindow
from calendar_layout.processors.day_bucketer import day_key


def crosses_midnight(event: NormalizedEvent) -> bool:
    """True when the event ends on a later calendar date than it starts."""
    return day_key(event.end) != day_key(event.start)


def effective_end(event: NormalizedEvent, window: RenderWindow) -> datetime.datetime:
    """
    End time used for layout.

    Cross-day events (and any end not after start) are cut at the window end.
    The stored event is left untouched.
    """
    if crosses_midnight(event) or event.end <= event.start:
        return window.end
    return event.end
