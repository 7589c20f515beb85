# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable event data and helpers for all tests.
"""

import pytest
from datetime import datetime, date, timedelta
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from calendar_layout.models import (
    LayoutConfig, NormalizedEvent, PositionedEvent, RenderWindow
)


# ==================== Configuration Fixtures ====================

@pytest.fixture
def layout_config():
    """Default layout configuration (64 px/hour, 32 px minimum, 60 min default)."""
    return LayoutConfig()


@pytest.fixture
def layout_config_file(tmp_path):
    """JSON layout config on disk."""
    config_file = tmp_path / "layout.json"
    config_file.write_text('{"pixels_per_hour": 48, "minimum_height_pixels": 20}')
    return config_file


# ==================== Date/Time Fixtures ====================

@pytest.fixture
def day():
    """The calendar day most tests lay out."""
    return date(2025, 11, 18)


@pytest.fixture
def window(day):
    """Render window for `day`."""
    return RenderWindow.for_date(day)


# ==================== Event Fixtures ====================

@pytest.fixture
def make_event(day):
    """Factory fixture for NormalizedEvent on `day` from 'HH:MM' strings."""
    def _create(event_id: str, start: str, end: str, on: date = None, **metadata) -> NormalizedEvent:
        base = datetime.combine(on or day, datetime.min.time())
        sh, sm = map(int, start.split(':'))
        eh, em = map(int, end.split(':'))
        start_dt = base + timedelta(hours=sh, minutes=sm)
        end_dt = base + timedelta(hours=eh, minutes=em)
        return NormalizedEvent(id=event_id, start=start_dt, end=end_dt, metadata=metadata)

    return _create


@pytest.fixture
def three_way_overlap(make_event):
    """A [09:00,10:00), B [09:30,10:30), C [09:45,10:15): all pairwise overlapping."""
    return [
        make_event("A", "09:00", "10:00"),
        make_event("B", "09:30", "10:30"),
        make_event("C", "09:45", "10:15"),
    ]


@pytest.fixture
def raw_studio_events():
    """Raw events as the studio calendar API returns them."""
    return [
        {
            'clientEventId': 'ev-1',
            'fromDatetime': '2025-11-18T09:00:00',
            'toDatetime': '2025-11-18T10:00:00',
            'title': 'Engagement shoot',
            'venue': 'City Park',
        },
        {
            'clientEventId': 'ev-2',
            'fromDatetime': '2025-11-18T09:30:00',
            'toDatetime': '2025-11-18T11:00:00',
            'title': 'Album review',
        },
        {
            'clientEventId': 'ev-3',
            'fromDatetime': '2025-11-18T22:00:00',
            'toDatetime': '2025-11-19T02:00:00',
            'title': 'Wedding reception',
        },
        {
            'clientEventId': 'ev-4',
            'fromDatetime': '2025-11-19T14:00:00',
            'title': 'Client call',
        },
        {
            'clientEventId': 'ev-bad',
            'fromDatetime': 'next tuesday',
            'title': 'Broken record',
        },
        {
            'clientEventId': 'ev-none',
            'title': 'Unscheduled',
        },
    ]


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# ==================== Auto-use Fixtures ====================

@pytest.fixture(autouse=True)
def isolate_logs(monkeypatch, tmp_path):
    """Keep log files of loggers created during a test out of the working tree."""
    monkeypatch.setenv("LOGS_DIR", str(tmp_path / "logs"))
    yield


# ==================== Helper Functions ====================

@pytest.fixture
def assert_layout_valid():
    """Helper asserting the no-collision and cluster-consistency properties."""
    def _assert_valid(positioned):
        for i, a in enumerate(positioned):
            assert 0 <= a.column < a.total_columns, f"{a.id} column outside its cluster"
            assert a.effective_end > a.start, f"{a.id} has empty interval"
            for b in positioned[i + 1:]:
                if a.overlaps_with(b):
                    assert a.column != b.column, f"{a.id} and {b.id} collide"

        # Every event in a connected overlap cluster shares one total
        seen = set()
        for i in range(len(positioned)):
            if i in seen:
                continue
            cluster, stack = [], [i]
            seen.add(i)
            while stack:
                j = stack.pop()
                cluster.append(positioned[j])
                for k, other in enumerate(positioned):
                    if k not in seen and positioned[j].overlaps_with(other):
                        seen.add(k)
                        stack.append(k)
            totals = {p.total_columns for p in cluster}
            assert len(totals) == 1, f"cluster {[p.id for p in cluster]} disagrees on width: {totals}"

    return _assert_valid
