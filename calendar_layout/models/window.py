# File: calendar_layout/models/window.py

from dataclasses import dataclass
from datetime import datetime, date, time, timedelta
from typing import Union

DAY_KEY_FORMAT = "%Y-%m-%d"


@dataclass
class RenderWindow:
    """
    A single calendar day, midnight to midnight: [start, end).

    Events are positioned relative to `start` and clamped to `end`.
    """
    start: datetime

    def __post_init__(self):
        """Snap the window start to midnight."""
        if isinstance(self.start, date) and not isinstance(self.start, datetime):
            self.start = datetime.combine(self.start, time.min)
        self.start = self.start.replace(hour=0, minute=0, second=0, microsecond=0, tzinfo=None)

    @classmethod
    def for_date(cls, day: Union[date, datetime]) -> 'RenderWindow':
        """Create the window covering a calendar date."""
        if isinstance(day, datetime):
            day = day.date()
        return cls(start=datetime.combine(day, time.min))

    @classmethod
    def from_day_key(cls, key: str) -> 'RenderWindow':
        """Create a window from a 'YYYY-MM-DD' key."""
        try:
            day = datetime.strptime(key, DAY_KEY_FORMAT).date()
        except (TypeError, ValueError):
            raise ValueError(f"Invalid day key (expected YYYY-MM-DD): {key!r}")
        return cls.for_date(day)

    @property
    def end(self) -> datetime:
        """Exclusive end of the window (next midnight)."""
        return self.start + timedelta(days=1)

    @property
    def day(self) -> date:
        return self.start.date()

    @property
    def day_key(self) -> str:
        return self.start.strftime(DAY_KEY_FORMAT)

    def contains(self, moment: datetime) -> bool:
        """Check if a moment falls inside the window."""
        return self.start <= moment < self.end

    def minutes_from_start(self, moment: datetime) -> float:
        """Minutes elapsed between the window start and `moment`."""
        return (moment - self.start).total_seconds() / 60
