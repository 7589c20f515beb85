# File: calendar_layout/models/events.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

@dataclass
class NormalizedEvent:
    """A validated event interval ready for layout."""
    id: str
    start: datetime
    end: datetime
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate event data."""
        if self.end <= self.start:
            raise ValueError(f"Event end time must be after start time: {self.id}")

    @property
    def day_key(self) -> str:
        """Canonical YYYY-MM-DD key of the start day."""
        return self.start.strftime("%Y-%m-%d")

    def duration_minutes(self) -> float:
        """Calculate event duration in minutes."""
        return (self.end - self.start).total_seconds() / 60

    def overlaps_with(self, other: 'NormalizedEvent') -> bool:
        """Check if this event overlaps with another (half-open intervals)."""
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            'id': self.id,
            'start': self.start.isoformat(),
            'end': self.end.isoformat(),
            'metadata': dict(self.metadata),
        }
