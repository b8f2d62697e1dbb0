"""Hour-of-day, weekday and calendar-day bucketing of mood entries"""
import logging
from typing import Iterable, List, Optional

import pandas as pd

from . import config
from .data_processing import entries_to_frame, summarize_by, to_optional_float
from .models import (
    DailyBucket,
    HourlyBucket,
    SeriesRange,
    WeekdayBucket,
    WEEKDAYS,
)

logger = logging.getLogger(__name__)

HOURS = range(24)


def mood_label_for(blended: Optional[float]) -> Optional[str]:
    """Map a blended score onto positive/neutral/negative"""
    if blended is None:
        return None
    if blended >= config.POSITIVE_THRESHOLD:
        return 'positive'
    if blended >= config.NEGATIVE_THRESHOLD:
        return 'neutral'
    return 'negative'


def bucket_by_hour(entries: Iterable) -> List[HourlyBucket]:
    """Average mind and body energy for each hour of the day (UTC)

    Always returns 24 buckets, hour 0 first. Hours without readings have
    None averages and a count of 0.
    """
    df = entries_to_frame(entries)
    summary = summarize_by(df, df['created_at'].dt.hour, index=HOURS)

    buckets = [
        HourlyBucket(
            hour=int(hour),
            mind=to_optional_float(row['mind_mean']),
            body=to_optional_float(row['body_mean']),
            count=int(row['mind_count'] + row['body_count']),
        )
        for hour, row in summary.iterrows()
    ]
    logger.debug(f"Bucketed {len(df)} entries into {len(buckets)} hourly buckets")
    return buckets


def bucket_by_weekday(entries: Iterable) -> List[WeekdayBucket]:
    """Average, min and max energy per weekday (UTC), Monday first

    Always returns 7 buckets. Min/max for a series are None when the
    weekday has no readings for it.
    """
    df = entries_to_frame(entries)
    # dayofweek: Monday=0 .. Sunday=6
    summary = summarize_by(df, df['created_at'].dt.dayofweek, index=range(len(WEEKDAYS)))

    buckets = []
    for day_num, row in summary.iterrows():
        buckets.append(WeekdayBucket(
            day=WEEKDAYS[int(day_num)],
            mind=to_optional_float(row['mind_mean']),
            body=to_optional_float(row['body_mean']),
            count=int(row['mind_count'] + row['body_count']),
            min=SeriesRange(
                mind=to_optional_float(row['mind_min']),
                body=to_optional_float(row['body_min']),
            ),
            max=SeriesRange(
                mind=to_optional_float(row['mind_max']),
                body=to_optional_float(row['body_max']),
            ),
        ))

    logger.debug(f"Bucketed {len(df)} entries into weekday buckets")
    return buckets


def daily_buckets_from_frame(df: pd.DataFrame) -> List[DailyBucket]:
    """Roll an entries frame up into one bucket per UTC calendar day"""
    day_keys = df['created_at'].map(lambda ts: ts.date().isoformat())
    summary = summarize_by(df, day_keys)

    buckets = []
    for date_key, row in summary.iterrows():
        mind = to_optional_float(row['mind_mean'])
        body = to_optional_float(row['body_mean'])
        blended = (mind + body) / 2 if mind is not None and body is not None else None

        buckets.append(DailyBucket(
            date=str(date_key),
            mind=mind,
            body=body,
            count=int(row['mind_count'] + row['body_count']),
            blended=blended,
            mood_label=mood_label_for(blended),
        ))

    return buckets


def bucket_by_month_day(entries: Iterable) -> List[DailyBucket]:
    """Daily rollups with blended score and mood label, oldest day first

    Only days with at least one entry are returned.
    """
    df = entries_to_frame(entries)
    buckets = daily_buckets_from_frame(df)
    logger.debug(f"Rolled {len(df)} entries up into {len(buckets)} days")
    return buckets
