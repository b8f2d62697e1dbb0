"""Shared fixtures for mood insights tests."""

import pytest

from mood_insights import MoodEntry


def make_entry(entry_id, created_at, mind=None, body=None, **kwargs):
    """Build a MoodEntry with positional energies."""
    return MoodEntry(id=entry_id, created_at=created_at, mind_energy=mind, body_energy=body, **kwargs)


@pytest.fixture
def mock_entries():
    """Two days of readings: Monday 2025-01-27 and Tuesday 2025-01-28."""
    return [
        make_entry("1", "2025-01-27T10:00:00.000Z", 80, 75, mood_label="positive"),
        make_entry("2", "2025-01-27T14:00:00.000Z", 70, 85, mood_label="positive"),
        make_entry("3", "2025-01-27T18:00:00.000Z", 60, 65, mood_label="neutral"),
        make_entry("4", "2025-01-28T09:00:00.000Z", 90, 88, mood_label="positive"),
        make_entry("5", "2025-01-28T15:00:00.000Z", 40, 35, mood_label="negative"),
    ]


@pytest.fixture
def partial_entries():
    """Entries missing one or both series."""
    return [
        make_entry("a", "2025-01-27T10:00:00Z", mind=80),
        make_entry("b", "2025-01-27T11:00:00Z", body=75),
        make_entry("c", "2025-01-29T11:30:00Z"),
        make_entry("d", "2025-02-02T23:59:00Z", mind=10, body=30),
    ]
