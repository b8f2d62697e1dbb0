"""Dashboard period windows and in-memory entry filtering"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Tuple

import pandas as pd

from . import config
from .models import WEEKDAYS, parse_timestamp

logger = logging.getLogger(__name__)

PERIODS = ('day', 'week', 'month')


def period_window(period: str, now: Optional[datetime] = None,
                  week_starts_on: Optional[str] = None) -> Tuple[pd.Timestamp, pd.Timestamp]:
    """Get the (start, end) range covering the current day, week or month

    Args:
        period: 'day', 'week' or 'month'
        now: End of the window, defaults to the current UTC time
        week_starts_on: 'Mon' or 'Sun', defaults to WEEK_STARTS_ON

    Returns:
        Tuple of UTC timestamps; start is midnight of the first day
    """
    if period not in PERIODS:
        raise ValueError(f"Unknown period {period!r}, expected one of {', '.join(PERIODS)}")

    week_start = week_starts_on or config.WEEK_STARTS_ON
    if week_start not in ('Mon', 'Sun'):
        raise ValueError(f"week_starts_on must be 'Mon' or 'Sun', got {week_start!r}")

    end = parse_timestamp(now if now is not None else datetime.now(timezone.utc))
    midnight = end.normalize()

    if period == 'day':
        start = midnight
    elif period == 'week':
        days_since_start = (end.dayofweek - WEEKDAYS.index(week_start)) % 7
        start = midnight - timedelta(days=days_since_start)
    else:
        start = midnight.replace(day=1)

    logger.debug(f"Window for {period}: {start.isoformat()} to {end.isoformat()}")
    return start, end


def filter_entries(entries: Iterable, start: Optional[datetime] = None,
                   end: Optional[datetime] = None,
                   tags: Optional[Iterable[str]] = None) -> List:
    """Keep entries inside [start, end] that share at least one of tags

    Bounds and tags are optional. Input order is preserved.
    """
    start_ts = parse_timestamp(start) if start is not None else None
    end_ts = parse_timestamp(end) if end is not None else None
    wanted_tags = set(tags) if tags is not None else None

    kept = []
    for entry in entries:
        created_at = parse_timestamp(entry.created_at, entry.id)
        if start_ts is not None and created_at < start_ts:
            continue
        if end_ts is not None and created_at > end_ts:
            continue
        if wanted_tags is not None and not wanted_tags.intersection(entry.tags or ()):
            continue
        kept.append(entry)

    return kept
