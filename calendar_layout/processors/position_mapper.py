# File: calendar_layout/processors/position_mapper.py
"""
Converts clock times into vertical pixel offsets.
"""

from dataclasses import replace

from calendar_layout.models import LayoutConfig, PositionedEvent, RenderWindow


def map_position(
    positioned: PositionedEvent,
    window: RenderWindow,
    config: LayoutConfig
) -> PositionedEvent:
    """
    Fill in `top` and `height` for a packed event.

    top    = minutes since window start / 60 * pixels_per_hour
    height = max(clamped duration / 60 * pixels_per_hour, minimum_height_pixels)
    """
    start_minutes = window.minutes_from_start(positioned.start)
    duration_minutes = (positioned.effective_end - positioned.start).total_seconds() / 60

    top = (start_minutes / 60) * config.pixels_per_hour
    height = max((duration_minutes / 60) * config.pixels_per_hour, config.minimum_height_pixels)

    return replace(positioned, top=top, height=height)
