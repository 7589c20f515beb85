# File: calendar_layout/processors/event_normalizer.py
"""
Event normalization module.
Turns raw event records into validated NormalizedEvent intervals.
"""

import datetime
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Tuple

from calendar_layout.models import NormalizedEvent, NormalizationIssue, parse_iso_datetime, to_wall_clock
from calendar_layout.models.config import DEFAULT_DURATION_MINUTES
from calendar_layout.utils.logger import setup_logger

logger = setup_logger(__name__)

# Primary key first, then the studio API's field name
ID_KEYS = ('id', 'clientEventId')
START_KEYS = ('start', 'fromDatetime')
END_KEYS = ('end', 'toDatetime')


def _first_present(raw: Mapping[str, Any], keys: Tuple[str, ...]) -> Tuple[Optional[str], Any]:
    """Return (key, value) of the first alias holding a value."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return key, value
    return None, None


def _parse_timestamp(value: Any, timezone: Optional[str]) -> Optional[datetime.datetime]:
    parsed = parse_iso_datetime(value)
    if parsed is None:
        return None
    return to_wall_clock(parsed, timezone)


def normalize_event(
    raw: Mapping[str, Any],
    default_duration_minutes: int = DEFAULT_DURATION_MINUTES,
    timezone: Optional[str] = None,
    index: int = 0
) -> Tuple[Optional[NormalizedEvent], Optional[NormalizationIssue]]:
    """
    Normalize a single raw event.

    Args:
        raw: Event mapping with id/start/end and arbitrary metadata
        default_duration_minutes: Duration used when the end is missing or not after start
        timezone: Target timezone for offset-carrying timestamps
        index: Position of the event in the input, used when it has no id

    Returns:
        (event, None) on success, (None, issue) when the event must be skipped
    """
    id_key, raw_id = _first_present(raw, ID_KEYS)
    event_id = str(raw_id) if raw_id is not None else f"<index {index}>"

    start_key, raw_start = _first_present(raw, START_KEYS)
    if raw_start is None:
        return None, NormalizationIssue(event_id, 'start', 'missing start timestamp')

    start = _parse_timestamp(raw_start, timezone)
    if start is None:
        return None, NormalizationIssue(event_id, 'start', f'unparsable start timestamp {raw_start!r}')

    default_end = start + datetime.timedelta(minutes=default_duration_minutes)
    end_key, raw_end = _first_present(raw, END_KEYS)
    end = _parse_timestamp(raw_end, timezone) if raw_end is not None else None

    if end is None:
        if raw_end is not None:
            logger.debug(f"Event {event_id}: unparsable end {raw_end!r}, using default duration")
        end = default_end
    elif end <= start:
        logger.debug(f"Event {event_id}: end not after start, using default duration")
        end = default_end

    # Only the keys actually read are consumed; other aliases stay in metadata
    used_keys = {id_key, start_key, end_key}
    metadata: Dict[str, Any] = {k: v for k, v in raw.items() if k not in used_keys}

    return NormalizedEvent(id=event_id, start=start, end=end, metadata=metadata), None


def normalize_events(
    raw_events: List[Mapping[str, Any]],
    default_duration_minutes: int = DEFAULT_DURATION_MINUTES,
    timezone: Optional[str] = None
) -> Tuple[List[NormalizedEvent], List[NormalizationIssue]]:
    """
    Normalize raw events, keeping input order and collecting skipped ones.

    Returns:
        Tuple of (valid events, issues for skipped events)
    """
    events: List[NormalizedEvent] = []
    issues: List[NormalizationIssue] = []

    for i, raw in enumerate(raw_events or []):
        if not isinstance(raw, Mapping):
            issues.append(NormalizationIssue(f"<index {i}>", 'event', f'not a mapping: {type(raw).__name__}'))
            continue

        event, issue = normalize_event(raw, default_duration_minutes, timezone, index=i)
        if issue is not None:
            issues.append(issue)
        else:
            events.append(event)

    for issue in issues:
        logger.warning(f"Skipping event: {issue}")

    logger.debug(
        f"Normalization complete: {len(events)} valid events "
        f"({len(issues)} skipped)"
    )
    return events, issues
