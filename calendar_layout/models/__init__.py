from .common import parse_iso_datetime, to_wall_clock
from .events import NormalizedEvent
from .window import RenderWindow, DAY_KEY_FORMAT
from .config import LayoutConfig
from .issues import NormalizationIssue
from .layout import PositionedEvent, DayLayout, LayoutResult

__all__ = [
    "parse_iso_datetime",
    "to_wall_clock",
    "NormalizedEvent",
    "RenderWindow",
    "DAY_KEY_FORMAT",
    "LayoutConfig",
    "NormalizationIssue",
    "PositionedEvent",
    "DayLayout",
    "LayoutResult"
]
