"""Custom exceptions for mood insights"""
from typing import Any, Optional


class MoodInsightsError(Exception):
    """Base exception for mood insights errors"""
    pass


class InvalidEntryError(MoodInsightsError):
    """Raised when a mood entry cannot be aggregated"""

    def __init__(self, message: str, entry_id: Optional[Any] = None):
        self.entry_id = entry_id
        if entry_id is not None:
            message = f"Entry {entry_id!r}: {message}"
        super().__init__(message)


class ConfigurationError(MoodInsightsError):
    """Raised when configuration is invalid"""
    pass
