# File: calendar_layout/processors/column_packer.py
"""
Overlap-column packing for a single day.

Events are placed greedily in start order. Each one takes the lowest column
not used by the already-placed events it overlaps, and joins their overlap
cluster. Every member of a cluster shares the cluster's column count, which
only ever grows as later events join.
"""

import itertools
from dataclasses import replace
from typing import Dict, List, Set

from calendar_layout.models import NormalizedEvent, PositionedEvent, RenderWindow
from calendar_layout.processors.day_bucketer import sort_by_start
from calendar_layout.processors.multi_day_clamp import effective_end
from calendar_layout.utils.logger import setup_logger

logger = setup_logger(__name__)


def first_free_column(used: Set[int]) -> int:
    """Smallest non-negative integer not in `used`."""
    column = 0
    while column in used:
        column += 1
    return column


def pack_columns(events: List[NormalizedEvent], window: RenderWindow) -> List[PositionedEvent]:
    """
    Assign a column and cluster-wide column count to each event of one day.

    Args:
        events: The day's events; re-sorted by start (stable) so ties keep input order
        window: The day the events are laid out in (used for the multi-day clamp)

    Returns:
        New PositionedEvent records in start order, without pixel fields
    """
    placed: List[PositionedEvent] = []
    cluster_of: List[int] = []
    totals: Dict[int, int] = {}
    cluster_ids = itertools.count()

    for event in sort_by_start(events):
        candidate = PositionedEvent(event=event, effective_end=effective_end(event, window))

        overlapping = [i for i, other in enumerate(placed) if other.overlaps_with(candidate)]
        column = first_free_column({placed[i].column for i in overlapping})

        touched = {cluster_of[i] for i in overlapping}
        if touched:
            cluster = min(touched)
            total = max([totals[c] for c in touched] + [column + 1])
            # Clusters bridged by this event become one
            absorbed = touched - {cluster}
            if absorbed:
                cluster_of = [cluster if c in absorbed else c for c in cluster_of]
                for c in absorbed:
                    del totals[c]
        else:
            cluster = next(cluster_ids)
            total = column + 1

        totals[cluster] = total
        placed.append(replace(candidate, column=column))
        cluster_of.append(cluster)

    packed = [
        replace(p, total_columns=totals[cluster_of[i]])
        for i, p in enumerate(placed)
    ]

    if packed:
        logger.debug(
            f"{window.day_key}: packed {len(packed)} events into "
            f"{len(totals)} clusters (widest {max(totals.values())} columns)"
        )
    return packed
