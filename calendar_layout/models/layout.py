# File: calendar_layout/models/layout.py

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List

from .events import NormalizedEvent
from .issues import NormalizationIssue
from .window import RenderWindow

@dataclass
class PositionedEvent:
    """An event with its lane and pixel placement inside one day."""
    event: NormalizedEvent
    effective_end: datetime
    column: int = 0
    total_columns: int = 1
    top: float = 0.0
    height: float = 0.0

    @property
    def id(self) -> str:
        return self.event.id

    @property
    def start(self) -> datetime:
        return self.event.start

    def overlaps_with(self, other: 'PositionedEvent') -> bool:
        """Check overlap of the clamped intervals [start, effective_end)."""
        return self.start < other.effective_end and other.start < self.effective_end

    def to_dict(self) -> dict:
        """Convert to dictionary for the rendering layer."""
        return {
            'id': self.id,
            'start': self.start.isoformat(),
            'end': self.event.end.isoformat(),
            'effective_end': self.effective_end.isoformat(),
            'column': self.column,
            'total_columns': self.total_columns,
            'top': self.top,
            'height': self.height,
            'metadata': dict(self.event.metadata),
        }


@dataclass
class DayLayout:
    """All positioned events of one render window."""
    window: RenderWindow
    events: List[PositionedEvent] = field(default_factory=list)

    @property
    def day_key(self) -> str:
        return self.window.day_key

    @property
    def max_columns(self) -> int:
        """Widest cluster of the day (1 for an empty day)."""
        return max([e.total_columns for e in self.events] + [1])

    @property
    def needs_scroll(self) -> bool:
        return self.max_columns > 1

    def to_dict(self) -> dict:
        return {
            'date': self.day_key,
            'max_columns': self.max_columns,
            'events': [e.to_dict() for e in self.events],
        }


@dataclass
class LayoutResult:
    """Layouts for a set of days plus the events that had to be skipped."""
    days: Dict[str, DayLayout] = field(default_factory=dict)
    issues: List[NormalizationIssue] = field(default_factory=list)

    @property
    def skipped_ids(self) -> List[str]:
        return [issue.event_id for issue in self.issues]

    def total_events(self) -> int:
        return sum(len(day.events) for day in self.days.values())

    def to_dict(self) -> dict:
        return {
            'days': [day.to_dict() for day in self.days.values()],
            'skipped_ids': self.skipped_ids,
            'issues': [str(issue) for issue in self.issues],
        }
