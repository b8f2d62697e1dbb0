"""Chart data for the insights dashboard"""
import logging
from typing import Iterable

from .aggregation import bucket_by_hour, bucket_by_month_day, bucket_by_weekday
from .models import ChartData, MoodStats
from .stats import calc_stats

logger = logging.getLogger(__name__)


def build_chart_data(entries: Iterable) -> ChartData:
    """Build every dashboard view for one collection of entries

    An empty collection gives empty bucket lists, which the dashboard
    shows as its no-data state.
    """
    entries = list(entries)
    if not entries:
        logger.info("No mood entries, returning empty chart data")
        return ChartData(hourly=[], weekly=[], monthly=[], stats=MoodStats())

    chart_data = ChartData(
        hourly=bucket_by_hour(entries),
        weekly=bucket_by_weekday(entries),
        monthly=bucket_by_month_day(entries),
        stats=calc_stats(entries),
    )
    logger.info(
        f"Processed chart data: {len(chart_data.hourly)} hourly, "
        f"{len(chart_data.weekly)} weekly, {len(chart_data.monthly)} daily"
    )
    return chart_data
