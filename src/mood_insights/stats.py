"""Summary statistics for the mood dashboard"""
import logging
from typing import Iterable, List, Sequence

import pandas as pd

from . import config
from .aggregation import daily_buckets_from_frame
from .data_processing import entries_to_frame, round_half_up
from .models import DailyBucket, MoodStats

logger = logging.getLogger(__name__)


def calculate_streak(dates: Sequence[str]) -> int:
    """Longest run of calendar-adjacent days in a set of YYYY-MM-DD keys

    Any gap of more than one day starts a new run. The longest run wins,
    not the most recent one.
    """
    if len(dates) == 0:
        return 0

    days = pd.Series(pd.to_datetime(sorted(set(dates)), format='%Y-%m-%d'))
    gaps = days.diff().dt.days
    # A new run starts wherever the gap is not exactly one day
    run_ids = (gaps != 1).cumsum()
    return int(run_ids.value_counts().max())


def find_most_volatile_day(daily: List[DailyBucket]):
    """Day with the widest mind/body gap, first one wins on ties"""
    most_volatile_day = None
    max_volatility = 0
    for day in daily:
        if day.mind is None or day.body is None:
            continue
        volatility = abs(day.mind - day.body)
        if volatility > max_volatility:
            max_volatility = volatility
            most_volatile_day = day.date
    return most_volatile_day


def find_best_day(daily: List[DailyBucket]):
    """Day with the highest blended score, first one wins on ties

    The baseline is 0, so a day blending to exactly 0 is never picked.
    """
    best_day = None
    max_blended = 0
    for day in daily:
        if day.blended is not None and day.blended > max_blended:
            max_blended = day.blended
            best_day = day.date
    return best_day


def calc_stats(entries: Iterable) -> MoodStats:
    """Calculate summary statistics for a collection of mood entries

    Args:
        entries: MoodEntry objects in any order

    Returns:
        MoodStats; all zeros and no days for an empty collection
    """
    df = entries_to_frame(entries)
    if df.empty:
        logger.info("No mood entries, returning empty stats")
        return MoodStats()

    mind_values = df['mind'].dropna()
    body_values = df['body'].dropna()
    avg_mind = float(mind_values.mean()) if len(mind_values) else 0.0
    avg_body = float(body_values.mean()) if len(body_values) else 0.0
    delta_avg = abs(avg_mind - avg_body)

    daily = daily_buckets_from_frame(df)
    precision = config.STATS_PRECISION

    stats = MoodStats(
        avg_mind=round_half_up(avg_mind, precision),
        avg_body=round_half_up(avg_body, precision),
        delta_avg=round_half_up(delta_avg, precision),
        most_volatile_day=find_most_volatile_day(daily),
        best_day=find_best_day(daily),
        streak_days=calculate_streak([day.date for day in daily]),
    )

    logger.info(
        f"Calculated stats over {len(df)} entries / {len(daily)} days: "
        f"avg mind {stats.avg_mind}, avg body {stats.avg_body}, streak {stats.streak_days}"
    )
    return stats
