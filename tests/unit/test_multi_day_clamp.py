# File: tests/unit/test_multi_day_clamp.py
"""
Unit tests for the multi-day clamp.
"""

from datetime import datetime

from calendar_layout.models import NormalizedEvent
from calendar_layout.processors.multi_day_clamp import crosses_midnight, effective_end


def test_same_day_event_keeps_its_end(make_event, window):
    event = make_event("a", "09:00", "10:00")

    assert crosses_midnight(event) is False
    assert effective_end(event, window) == datetime(2025, 11, 18, 10, 0)


def test_overnight_event_is_clamped_to_midnight(window):
    event = NormalizedEvent("late", datetime(2025, 11, 18, 22, 0), datetime(2025, 11, 19, 2, 0))

    assert crosses_midnight(event) is True
    assert effective_end(event, window) == datetime(2025, 11, 19, 0, 0)


def test_event_ending_exactly_at_midnight(window):
    event = NormalizedEvent("late", datetime(2025, 11, 18, 23, 0), datetime(2025, 11, 19, 0, 0))
    assert effective_end(event, window) == window.end


def test_clamp_does_not_modify_event(window):
    event = NormalizedEvent("late", datetime(2025, 11, 18, 22, 0), datetime(2025, 11, 20, 9, 0))

    effective_end(event, window)

    assert event.end == datetime(2025, 11, 20, 9, 0)


def test_end_not_after_start_falls_back_to_window_end(make_event, window):
    event = make_event("odd", "09:00", "10:00")
    # Bypass __post_init__ validation the way a stale record might
    event.end = event.start

    assert effective_end(event, window) == window.end
