"""Data models for mood entries and the aggregated views built from them"""
import logging
import math
import re
from dataclasses import dataclass, field
from datetime import datetime
from numbers import Real
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import pandas as pd

from . import config
from .exceptions import InvalidEntryError

logger = logging.getLogger(__name__)

WEEKDAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')
MOOD_LABELS = ('positive', 'neutral', 'negative')

# YYYY-MM-DD with optional time, fraction and UTC offset
ISO_TIMESTAMP = re.compile(
    r'^\d{4}-\d{2}-\d{2}'
    r'(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}(?::?\d{2})?)?)?$'
)


def parse_timestamp(value: Any, entry_id: Any = None) -> pd.Timestamp:
    """Parse an entry timestamp into a UTC Timestamp

    Naive values are taken to be UTC already; aware values are converted.

    Args:
        value: ISO-8601 string, datetime or Timestamp
        entry_id: Id of the owning entry, used in error messages

    Returns:
        Timezone-aware UTC Timestamp

    Raises:
        InvalidEntryError: If the value is missing or not an absolute instant
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidEntryError("missing created_at timestamp", entry_id)
    if not isinstance(value, (str, datetime)):
        raise InvalidEntryError(f"created_at must be a string or datetime, got {type(value).__name__}", entry_id)
    if isinstance(value, str) and not ISO_TIMESTAMP.match(value.strip()):
        raise InvalidEntryError(f"created_at {value!r} is not an ISO-8601 timestamp", entry_id)

    try:
        ts = pd.Timestamp(value.strip() if isinstance(value, str) else value)
    except (ValueError, TypeError, OverflowError) as e:
        raise InvalidEntryError(f"unparsable created_at {value!r}: {e}", entry_id) from e

    if pd.isna(ts):
        raise InvalidEntryError(f"unparsable created_at {value!r}", entry_id)

    if ts.tzinfo is None:
        return ts.tz_localize('UTC')
    return ts.tz_convert('UTC')


def _validate_energy(value: Any, name: str, entry_id: Any) -> Optional[float]:
    """Check an optional energy reading against the 0-100 scale"""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidEntryError(f"{name} must be a number, got {value!r}", entry_id)
    value = float(value)
    if math.isnan(value):
        raise InvalidEntryError(f"{name} must be a number, got NaN", entry_id)
    if not config.ENERGY_MIN <= value <= config.ENERGY_MAX:
        raise InvalidEntryError(
            f"{name} {value} outside {config.ENERGY_MIN}-{config.ENERGY_MAX}", entry_id
        )
    return value


@dataclass(frozen=True)
class MoodEntry:
    """One mood observation with optional mind and body energy readings"""
    id: Any
    created_at: pd.Timestamp
    mind_energy: Optional[float] = None
    body_energy: Optional[float] = None
    mood_label: Optional[str] = None
    note: Optional[str] = None
    tags: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'created_at', parse_timestamp(self.created_at, self.id))
        object.__setattr__(self, 'mind_energy', _validate_energy(self.mind_energy, 'mind_energy', self.id))
        object.__setattr__(self, 'body_energy', _validate_energy(self.body_energy, 'body_energy', self.id))
        object.__setattr__(self, 'tags', tuple(self.tags or ()))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> 'MoodEntry':
        """Build an entry from a stored mood row

        Rows written by the mobile client keep energies under a nested
        ``mood_value`` mapping and the instant under ``timestamp``; older
        rows use the flat ``created_at``/``mind_energy``/``body_energy`` columns.

        Args:
            record: Row mapping as returned by the persistence layer

        Returns:
            MoodEntry for the row
        """
        mood_value = record.get('mood_value') or {}
        created_at = record.get('timestamp')
        if created_at is None:
            created_at = record.get('created_at')

        mind = mood_value.get('mind')
        if mind is None:
            mind = record.get('mind_energy')
        body = mood_value.get('body')
        if body is None:
            body = record.get('body_energy')

        return cls(
            id=record.get('id'),
            created_at=created_at,
            mind_energy=mind,
            body_energy=body,
            mood_label=record.get('mood_label'),
            note=record.get('note'),
            tags=record.get('tags') or (),
        )


def entries_from_records(records: Iterable[Mapping[str, Any]]) -> List[MoodEntry]:
    """Build entries for a whole result set of stored mood rows"""
    entries = [MoodEntry.from_record(record) for record in records]
    logger.info(f"Built {len(entries)} mood entries from records")
    return entries


@dataclass(frozen=True)
class HourlyBucket:
    hour: int
    mind: Optional[float]
    body: Optional[float]
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'hour': self.hour, 'mind': self.mind, 'body': self.body, 'count': self.count}


@dataclass(frozen=True)
class SeriesRange:
    """A per-series extreme (min or max) for a weekday bucket"""
    mind: Optional[float] = None
    body: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'mind': self.mind, 'body': self.body}


@dataclass(frozen=True)
class WeekdayBucket:
    day: str
    mind: Optional[float]
    body: Optional[float]
    count: int
    min: SeriesRange = field(default_factory=SeriesRange)
    max: SeriesRange = field(default_factory=SeriesRange)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'day': self.day,
            'mind': self.mind,
            'body': self.body,
            'count': self.count,
            'min': self.min.to_dict(),
            'max': self.max.to_dict(),
        }


@dataclass(frozen=True)
class DailyBucket:
    date: str
    mind: Optional[float]
    body: Optional[float]
    count: int
    blended: Optional[float]
    mood_label: Optional[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'date': self.date,
            'mind': self.mind,
            'body': self.body,
            'count': self.count,
            'blended': self.blended,
            'mood_label': self.mood_label,
        }


@dataclass(frozen=True)
class MoodStats:
    avg_mind: float = 0.0
    avg_body: float = 0.0
    delta_avg: float = 0.0
    most_volatile_day: Optional[str] = None
    best_day: Optional[str] = None
    streak_days: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'avgMind': self.avg_mind,
            'avgBody': self.avg_body,
            'deltaAvg': self.delta_avg,
            'mostVolatileDay': self.most_volatile_day,
            'bestDay': self.best_day,
            'streakDays': self.streak_days,
        }


@dataclass(frozen=True)
class ChartData:
    """All dashboard views for one collection of entries"""
    hourly: List[HourlyBucket]
    weekly: List[WeekdayBucket]
    monthly: List[DailyBucket]
    stats: MoodStats

    def to_dict(self) -> Dict[str, Any]:
        return {
            'hourly': [bucket.to_dict() for bucket in self.hourly],
            'weekly': [bucket.to_dict() for bucket in self.weekly],
            'monthly': [bucket.to_dict() for bucket in self.monthly],
            'stats': self.stats.to_dict(),
        }
