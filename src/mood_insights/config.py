"""Configuration for mood insights aggregation"""
import os
import logging
from typing import Optional

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Mood label thresholds (applied to the blended mind/body score)
POSITIVE_THRESHOLD = float(os.environ.get('MOOD_POSITIVE_THRESHOLD', '67'))
NEGATIVE_THRESHOLD = float(os.environ.get('MOOD_NEGATIVE_THRESHOLD', '33'))

# Summary statistics
STATS_PRECISION = int(os.environ.get('MOOD_STATS_PRECISION', '2'))  # decimal places

# Period windows
WEEK_STARTS_ON = os.environ.get('MOOD_WEEK_STARTS_ON', 'Mon')  # 'Mon' or 'Sun'

# Energy readings are percentages
ENERGY_MIN = 0
ENERGY_MAX = 100

# Logging Configuration
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None):
    """Configure root logging for applications embedding the engine

    Args:
        level: Log level name, defaults to LOG_LEVEL
    """
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT
    )
    logger.debug(f"Logging configured at {level_name}")


def validate_config():
    """Validate that configuration values are consistent

    Raises:
        ConfigurationError: If a threshold, precision or week start is unusable
    """
    if not ENERGY_MIN <= NEGATIVE_THRESHOLD <= POSITIVE_THRESHOLD <= ENERGY_MAX:
        raise ConfigurationError(
            f"Mood thresholds must satisfy {ENERGY_MIN} <= negative <= positive <= {ENERGY_MAX}, "
            f"got negative={NEGATIVE_THRESHOLD}, positive={POSITIVE_THRESHOLD}"
        )
    if STATS_PRECISION < 0:
        raise ConfigurationError(f"MOOD_STATS_PRECISION must be >= 0, got {STATS_PRECISION}")
    if WEEK_STARTS_ON not in ('Mon', 'Sun'):
        raise ConfigurationError(f"MOOD_WEEK_STARTS_ON must be 'Mon' or 'Sun', got {WEEK_STARTS_ON!r}")


# Run validation
validate_config()
