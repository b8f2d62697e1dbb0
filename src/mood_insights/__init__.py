# mood_insights/__init__.py
"""
Mood time-series aggregation for the insights dashboard
"""
from .models import (
    MoodEntry,
    HourlyBucket,
    WeekdayBucket,
    SeriesRange,
    DailyBucket,
    MoodStats,
    ChartData,
    entries_from_records,
    parse_timestamp
)

from .aggregation import (
    bucket_by_hour,
    bucket_by_weekday,
    bucket_by_month_day,
    mood_label_for
)

from .stats import calc_stats
from .periods import period_window, filter_entries
from .insights import build_chart_data
from .exceptions import MoodInsightsError, InvalidEntryError, ConfigurationError

__all__ = [
    # Models
    'MoodEntry',
    'HourlyBucket',
    'WeekdayBucket',
    'SeriesRange',
    'DailyBucket',
    'MoodStats',
    'ChartData',
    'entries_from_records',
    'parse_timestamp',
    # Aggregation
    'bucket_by_hour',
    'bucket_by_weekday',
    'bucket_by_month_day',
    'mood_label_for',
    'calc_stats',
    # Periods
    'period_window',
    'filter_entries',
    # Chart data
    'build_chart_data',
    # Errors
    'MoodInsightsError',
    'InvalidEntryError',
    'ConfigurationError'
]
