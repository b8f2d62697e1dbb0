"""
Data processing utilities shared by the mood aggregators
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable, Optional

import numpy as np
import pandas as pd

from .models import parse_timestamp

logger = logging.getLogger(__name__)

SERIES = ('mind', 'body')
FRAME_COLUMNS = ['id', 'created_at', 'mind', 'body']


def to_optional_float(value: Any) -> Optional[float]:
    """Convert a pandas scalar to a float, mapping NaN to None"""
    if value is None or pd.isna(value):
        return None
    return float(value)


def round_half_up(value: float, precision: int) -> float:
    """Round to precision decimals with halves going up (50.125 -> 50.13)"""
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def entries_to_frame(entries: Iterable) -> pd.DataFrame:
    """Build a dataframe with one row per entry

    Columns are ``id``, ``created_at`` (UTC) and float ``mind``/``body``
    readings, NaN where the entry has no value for that series.

    Args:
        entries: Iterable of MoodEntry-like objects, in any order

    Returns:
        Entries dataframe

    Raises:
        InvalidEntryError: If an entry timestamp cannot be parsed
    """
    rows = []
    for entry in entries:
        rows.append({
            'id': entry.id,
            'created_at': parse_timestamp(entry.created_at, entry.id),
            'mind': np.nan if entry.mind_energy is None else entry.mind_energy,
            'body': np.nan if entry.body_energy is None else entry.body_energy,
        })

    df = pd.DataFrame.from_records(rows, columns=FRAME_COLUMNS)
    df['created_at'] = pd.to_datetime(df['created_at'], utc=True)
    for series in SERIES:
        df[series] = df[series].astype(float)

    logger.debug(f"Built entries frame with {len(df)} rows")
    return df


def summarize_by(df: pd.DataFrame, key: pd.Series, index: Optional[Iterable] = None) -> pd.DataFrame:
    """Summarize both series per bucket key

    Produces ``<series>_mean``, ``<series>_count``, ``<series>_min`` and
    ``<series>_max`` columns for mind and body. Counts only include rows
    carrying a value for that series, so missing readings never pull an
    average towards zero.

    Args:
        df: Entries dataframe from entries_to_frame
        key: Bucket key aligned with df
        index: Fixed set of bucket keys; absent keys become empty buckets

    Returns:
        Summary dataframe indexed by bucket key, sorted ascending
    """
    columns = {}
    for series in SERIES:
        grouped = df[series].groupby(key)
        columns[f'{series}_mean'] = grouped.mean()
        columns[f'{series}_count'] = grouped.count()
        columns[f'{series}_min'] = grouped.min()
        columns[f'{series}_max'] = grouped.max()

    summary = pd.DataFrame(columns)
    if index is not None:
        summary = summary.reindex(list(index))
    else:
        summary = summary.sort_index()

    for series in SERIES:
        summary[f'{series}_count'] = summary[f'{series}_count'].fillna(0).astype(int)

    return summary
