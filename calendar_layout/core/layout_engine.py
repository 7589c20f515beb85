# File: calendar_layout/core/layout_engine.py
"""
Main layout engine module.
Coordinates normalization, bucketing, packing and positioning to produce
day, week and month layouts.

The engine holds only configuration; every call is a pure function of its
arguments, so one instance can serve concurrent views.
"""

import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import pytz

from calendar_layout.core.config_manager import Config
from calendar_layout.models import (
    DayLayout,
    LayoutConfig,
    LayoutResult,
    NormalizationIssue,
    NormalizedEvent,
    PositionedEvent,
    RenderWindow,
)
from calendar_layout.processors import event_normalizer, day_bucketer
from calendar_layout.processors.column_packer import pack_columns
from calendar_layout.processors.position_mapper import map_position
from calendar_layout.utils.calendar import week_days, month_days
from calendar_layout.utils.logger import setup_logger

logger = setup_logger(__name__)


class CalendarLayoutEngine:
    """
    Lays out calendar events for the day, week and month views.
    """

    def __init__(self, config: Optional[LayoutConfig] = None, timezone: Optional[str] = None):
        """
        Initialize the engine.

        Args:
            config: Layout knobs (defaults: 64 px/hour, 32 px minimum, 60 min default)
            timezone: Timezone that offset-carrying timestamps are converted to

        Raises:
            ValueError: If the timezone is unknown
        """
        if timezone:
            try:
                pytz.timezone(timezone)
            except pytz.UnknownTimeZoneError:
                raise ValueError(f"Unknown timezone: {timezone!r}")

        self.config = config or LayoutConfig()
        self.timezone = timezone

    def normalize_events(
        self, raw_events: List[Mapping[str, Any]]
    ) -> Tuple[List[NormalizedEvent], List[NormalizationIssue]]:
        """Normalize raw events with this engine's duration and timezone settings."""
        return event_normalizer.normalize_events(
            raw_events,
            default_duration_minutes=self.config.default_duration_minutes,
            timezone=self.timezone,
        )

    def bucket_by_day(self, events: List[NormalizedEvent]) -> Dict[str, List[NormalizedEvent]]:
        return day_bucketer.bucket_by_day(events)

    def layout_day(self, events: List[NormalizedEvent], window: RenderWindow) -> List[PositionedEvent]:
        """
        Lay out one day.

        Events that do not start inside the window are ignored.

        Returns:
            Positioned events in start order
        """
        day_events = [e for e in events if window.contains(e.start)]
        if len(day_events) != len(events):
            logger.debug(
                f"{window.day_key}: ignoring {len(events) - len(day_events)} "
                f"events that start outside the window"
            )

        packed = pack_columns(day_events, window)
        return [map_position(p, window, self.config) for p in packed]

    def layout_days(
        self,
        raw_events: List[Mapping[str, Any]],
        days: Iterable[Union[datetime.date, str]]
    ) -> LayoutResult:
        """
        Full pipeline for a set of days: normalize once, bucket, lay out each day.

        Days without events are included with an empty layout.
        """
        events, issues = self.normalize_events(raw_events)
        buckets = self.bucket_by_day(events)

        result = LayoutResult(issues=issues)
        for day in days:
            window = RenderWindow.from_day_key(day) if isinstance(day, str) else RenderWindow.for_date(day)
            positioned = self.layout_day(buckets.get(window.day_key, []), window)
            result.days[window.day_key] = DayLayout(window=window, events=positioned)

        logger.info(
            f"Laid out {result.total_events()} events over {len(result.days)} days "
            f"({len(issues)} skipped)"
        )
        return result

    def layout_week(self, raw_events: List[Mapping[str, Any]], day: datetime.date) -> LayoutResult:
        """Lay out the Sunday-based week containing `day`."""
        return self.layout_days(raw_events, week_days(day))

    def layout_month(self, raw_events: List[Mapping[str, Any]], year: int, month: int) -> LayoutResult:
        """Lay out every day of a month."""
        return self.layout_days(raw_events, month_days(year, month))


class LayoutEngineFactory:
    """Factory for creating CalendarLayoutEngine instances from configuration."""

    @staticmethod
    def create(config_file=None) -> CalendarLayoutEngine:
        """
        Create an engine from the environment (or a JSON config file).

        Raises:
            ValueError: If configuration is invalid
        """
        if config_file is not None:
            layout_config = Config.load_layout_config(config_file)
            timezone_error = Config.timezone_error()
            if timezone_error:
                logger.error(f"Configuration Error: {timezone_error}")
                raise ValueError("Configuration validation failed. Check the TIMEZONE setting.")
        else:
            if not Config.validate():
                raise ValueError("Configuration validation failed. Check the CALENDAR_* and TIMEZONE settings.")
            layout_config = Config.layout_config()

        logger.debug(f"Creating layout engine with {layout_config.to_dict()}")
        return CalendarLayoutEngine(config=layout_config, timezone=Config.TARGET_TIMEZONE)
