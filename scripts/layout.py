"""
Calendar layout entry point.
Reads raw events from a JSON file and prints the computed layout for a day,
the week containing it, or its month.

    python scripts/layout.py events.json --date 2025-11-18 --view week
"""

import argparse
import datetime
import json
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from calendar_layout.core.config_manager import Config
from calendar_layout.core.layout_engine import CalendarLayoutEngine, LayoutEngineFactory
from calendar_layout.models import LayoutResult
from calendar_layout.utils.calendar import (
    DAY_NAMES,
    MONTH_NAMES,
    column_geometry,
    event_color,
    format_time_12h,
)
from calendar_layout.utils.logger import setup_logger

logger = setup_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute calendar event layouts.")
    parser.add_argument("events_file", type=Path, help="JSON file containing a list of events")
    parser.add_argument("--date", default=None, help="Day to render (YYYY-MM-DD, default: today)")
    parser.add_argument("--view", choices=("day", "week", "month"), default="day")
    parser.add_argument("--config", type=Path, default=None, help="JSON layout config file")
    parser.add_argument("--format", choices=("json", "text"), default="json", dest="output_format")
    parser.add_argument(
        "--scroll", action="store_true",
        help=f"Use fixed {Config.SCROLL_COLUMN_WIDTH}px lanes on days with overlapping events"
    )
    return parser


def result_to_json(result: LayoutResult, scroll_width: Optional[float] = None) -> dict:
    """Layout result plus the horizontal geometry the views need."""
    today = datetime.date.today()
    data = result.to_dict()
    for day_data, day in zip(data['days'], result.days.values()):
        for event_data, positioned in zip(day_data['events'], day.events):
            event_data['geometry'] = column_geometry(positioned, day.max_columns, scroll_width)
            event_data['color'] = event_color(positioned.start, today)
    return data


def render_text(result: LayoutResult) -> str:
    """Readable per-day listing of the layout."""
    lines: List[str] = []
    for day in result.days.values():
        d = day.window.day
        weekday = DAY_NAMES[(d.weekday() + 1) % 7]
        lines.append(f"{weekday} {MONTH_NAMES[d.month - 1]} {d.day}, {d.year} ({len(day.events)})")
        for p in day.events:
            title = p.event.metadata.get('title') or p.event.metadata.get('eventDesc') or 'Event'
            lines.append(
                f"  {format_time_12h(p.start)} - {format_time_12h(p.effective_end)}"
                f"  [col {p.column + 1}/{p.total_columns}]  {title}"
            )
    if result.skipped_ids:
        lines.append(f"Skipped: {', '.join(result.skipped_ids)}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    try:
        day = datetime.datetime.strptime(args.date, "%Y-%m-%d").date() if args.date else datetime.date.today()
    except ValueError:
        logger.error(f"Invalid --date (expected YYYY-MM-DD): {args.date}")
        return 1

    try:
        with open(args.events_file, 'r', encoding='utf-8') as f:
            raw_events = json.load(f)
    except FileNotFoundError:
        logger.error(f"Events file not found: {args.events_file}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Events file is not valid JSON: {e}")
        return 1

    if not isinstance(raw_events, list):
        logger.error("Events file must contain a JSON list of events")
        return 1

    try:
        engine: CalendarLayoutEngine = LayoutEngineFactory.create(args.config)
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Could not load configuration: {e}")
        return 1

    if args.view == "week":
        result = engine.layout_week(raw_events, day)
    elif args.view == "month":
        result = engine.layout_month(raw_events, day.year, day.month)
    else:
        result = engine.layout_days(raw_events, [day])

    if args.output_format == "text":
        print(render_text(result))
    else:
        print(json.dumps(result_to_json(result, Config.SCROLL_COLUMN_WIDTH if args.scroll else None), indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
