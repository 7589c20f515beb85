# File: tests/unit/test_position_mapper.py
"""
Unit tests for pixel positioning.
"""

from datetime import datetime

import pytest

from calendar_layout.models import LayoutConfig, NormalizedEvent, PositionedEvent
from calendar_layout.processors.multi_day_clamp import effective_end
from calendar_layout.processors.position_mapper import map_position


def positioned(event, window):
    return PositionedEvent(event=event, effective_end=effective_end(event, window))


class TestMapPosition:

    def test_top_and_height(self, make_event, window, layout_config):
        result = map_position(positioned(make_event("a", "09:30", "11:00"), window), window, layout_config)

        assert result.top == pytest.approx(9.5 * 64)
        assert result.height == pytest.approx(1.5 * 64)

    def test_midnight_event_is_at_top(self, make_event, window, layout_config):
        result = map_position(positioned(make_event("a", "00:00", "01:00"), window), window, layout_config)
        assert result.top == 0

    def test_short_event_gets_minimum_height(self, make_event, window, layout_config):
        result = map_position(positioned(make_event("a", "09:00", "09:05"), window), window, layout_config)

        assert result.height == 32
        assert result.height >= layout_config.minimum_height_pixels

    def test_overnight_event_height_is_clamped(self, window, layout_config):
        event = NormalizedEvent("late", datetime(2025, 11, 18, 22, 0), datetime(2025, 11, 19, 2, 0))

        result = map_position(positioned(event, window), window, layout_config)

        assert result.top == pytest.approx(22 * 64)
        assert result.height == pytest.approx(2 * 64)
        assert result.effective_end == datetime(2025, 11, 19, 0, 0)

    def test_custom_scale(self, make_event, window):
        config = LayoutConfig(pixels_per_hour=100, minimum_height_pixels=10)

        result = map_position(positioned(make_event("a", "06:00", "06:30"), window), window, config)

        assert result.top == pytest.approx(600)
        assert result.height == pytest.approx(50)

    def test_columns_are_preserved(self, make_event, window, layout_config):
        event = make_event("a", "09:00", "10:00")
        packed = PositionedEvent(event=event, effective_end=event.end, column=2, total_columns=3)

        result = map_position(packed, window, layout_config)

        assert (result.column, result.total_columns) == (2, 3)
        assert packed.top == 0.0
