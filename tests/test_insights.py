"""Tests for the dashboard chart bundle."""

from mood_insights import ChartData, MoodStats, build_chart_data, calc_stats


def test_build_chart_data_empty():
    """Should return the empty dashboard state."""
    result = build_chart_data([])

    assert result == ChartData(hourly=[], weekly=[], monthly=[], stats=MoodStats())


def test_build_chart_data(mock_entries):
    """Should bundle every view for the same entries."""
    result = build_chart_data(mock_entries)

    assert len(result.hourly) == 24
    assert len(result.weekly) == 7
    assert [d.date for d in result.monthly] == ["2025-01-27", "2025-01-28"]
    assert result.stats == calc_stats(mock_entries)


def test_build_chart_data_accepts_generators(mock_entries):
    """Should consume a one-shot iterable only once."""
    result = build_chart_data(e for e in mock_entries)

    assert sum(b.count for b in result.hourly) == 10
    assert result.stats.streak_days == 2


def test_chart_data_to_dict(mock_entries):
    """Should render plain nested structures for the presentation layer."""
    data = build_chart_data(mock_entries).to_dict()

    assert set(data) == {"hourly", "weekly", "monthly", "stats"}
    assert data["hourly"][10] == {"hour": 10, "mind": 80.0, "body": 75.0, "count": 2}
    assert data["weekly"][0]["min"] == {"mind": 60.0, "body": 65.0}
    assert data["monthly"][0]["mood_label"] == "positive"
    assert data["stats"]["avgMind"] == 68
    assert data["stats"]["streakDays"] == 2
