"""
Calendar event layout engine.

Functional interface used by the calendar views:

    events, issues = normalize_events(raw_events)
    buckets = bucket_by_day(events)
    positioned = layout_day(buckets["2025-11-18"], RenderWindow.from_day_key("2025-11-18"))
"""

from typing import List, Optional

from calendar_layout.models import (
    LayoutConfig,
    NormalizedEvent,
    PositionedEvent,
    RenderWindow,
)
from calendar_layout.processors.event_normalizer import normalize_events
from calendar_layout.processors.day_bucketer import bucket_by_day
from calendar_layout.core.layout_engine import CalendarLayoutEngine, LayoutEngineFactory


def layout_day(
    events: List[NormalizedEvent],
    window: RenderWindow,
    config: Optional[LayoutConfig] = None
) -> List[PositionedEvent]:
    """Lay out one day's normalized events inside `window`."""
    return CalendarLayoutEngine(config=config).layout_day(events, window)


__all__ = [
    "normalize_events",
    "bucket_by_day",
    "layout_day",
    "CalendarLayoutEngine",
    "LayoutEngineFactory",
    "LayoutConfig",
    "RenderWindow",
]
