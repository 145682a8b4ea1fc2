"""
Unit Tests for Weekly Stats Aggregation

Tests averages, top lists and hour-of-day patterns.
"""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from haven.domain.models.episode import Episode
from haven.domain.models.insight import HourCount, ToolUsage, TriggerCount
from haven.services.insights import compute_weekly_stats
from haven.services.insights.weekly_stats import round_one_decimal


def _episode(
    intensity: int,
    hour: int = 9,
    triggers: tuple[str, ...] = (),
    tools: tuple[str, ...] = (),
    rating: Optional[int] = None,
) -> Episode:
    return Episode(
        intensity=intensity,
        timestamp=datetime(2026, 3, 10, hour, 15, tzinfo=timezone.utc),
        triggers=triggers,
        tools_used=tools,
        helpful_rating=rating,
    )


class TestAverages:
    """Tests for episode count and rounding."""

    def test_empty_week_is_none(self) -> None:
        """No episodes produce no stats."""
        assert compute_weekly_stats([]) is None

    def test_average_rounded_to_one_decimal(self) -> None:
        """Mean intensity is rounded to one decimal."""
        stats = compute_weekly_stats([_episode(5), _episode(6), _episode(6)])

        assert stats.total_episodes == 3
        assert stats.average_intensity == 5.7

    def test_average_rounds_halves_up(self) -> None:
        """A mean of 4.25 reports as 4.3, not banker's 4.2."""
        stats = compute_weekly_stats([_episode(4), _episode(5), _episode(4), _episode(4)])

        assert stats.average_intensity == 4.3
        assert stats.to_remote_payload()["avgIntensity"] == "4.3"

    def test_helpfulness_rounds_halves_up(self) -> None:
        """Tool helpfulness uses the same half-up rounding."""
        episodes = [
            _episode(5, tools=("Walk",), rating=rating) for rating in (4, 5, 4, 4)
        ]

        stats = compute_weekly_stats(episodes)

        assert stats.top_tools == (ToolUsage("Walk", 4, 4.3),)

    @pytest.mark.parametrize(
        "value,expected",
        [(4.25, 4.3), (4.35, 4.4), (6.05, 6.1), (4.24, 4.2), (7.0, 7.0), (0.0, 0.0)],
    )
    def test_round_one_decimal(self, value: float, expected: float) -> None:
        """Halves round away from zero at the first decimal."""
        assert round_one_decimal(value) == expected


class TestTopLists:
    """Tests for top triggers and tools."""

    def test_top_triggers_limited_and_sorted(self) -> None:
        """At most three triggers, most frequent first, first-seen on ties."""
        episodes = [
            _episode(5, triggers=("Work", "Sleep issues")),
            _episode(5, triggers=("Work", "Health worry")),
            _episode(5, triggers=("Work", "Health worry", "Crowds")),
            _episode(5, triggers=("Money",)),
        ]

        stats = compute_weekly_stats(episodes)

        assert stats.top_triggers == (
            TriggerCount("Work", 3),
            TriggerCount("Health worry", 2),
            TriggerCount("Sleep issues", 1),
        )

    def test_tool_helpfulness_averages_rated_uses_only(self) -> None:
        """Unrated uses count toward usage but not helpfulness."""
        episodes = [
            _episode(6, tools=("Box breathing",), rating=4),
            _episode(6, tools=("Box breathing",)),
            _episode(6, tools=("Box breathing", "Walk"), rating=5),
            _episode(6, tools=("Walk",)),
            _episode(6, tools=("Music",)),
        ]

        stats = compute_weekly_stats(episodes)

        assert stats.top_tools == (
            ToolUsage("Box breathing", 3, 4.5),
            ToolUsage("Walk", 2, 5.0),
            ToolUsage("Music", 1, 0.0),
        )


class TestTimePatterns:
    """Tests for hour-of-day buckets."""

    def test_sorted_by_count_then_hour(self) -> None:
        """Busiest hour first, earlier hour on ties, empty hours omitted."""
        episodes = [_episode(5, hour=22), _episode(5, hour=8), _episode(5, hour=22), _episode(5, hour=3)]

        stats = compute_weekly_stats(episodes)

        assert stats.time_patterns == (HourCount(22, 2), HourCount(3, 1), HourCount(8, 1))

    def test_use_given_timezone(self) -> None:
        """Hours are bucketed in the configured timezone."""
        stats = compute_weekly_stats([_episode(5, hour=23)], tz=ZoneInfo("Asia/Tokyo"))

        assert stats.time_patterns == (HourCount(8, 1),)

    def test_naive_timestamps_read_as_utc(self) -> None:
        """Timestamps without tzinfo are treated as UTC."""
        episode = Episode(intensity=5, timestamp=datetime(2026, 3, 10, 14, 0))

        stats = compute_weekly_stats([episode], tz=ZoneInfo("Europe/London"))

        assert stats.time_patterns == (HourCount(14, 1),)


def test_remote_payload_shape() -> None:
    """Stats serialize to the classifier's insight request."""
    stats = compute_weekly_stats([_episode(7, triggers=("Work",), tools=("Walk",), rating=3)])

    assert stats.to_remote_payload() == {
        "episodeCount": 1,
        "avgIntensity": "7.0",
        "topTriggers": [{"trigger": "Work", "count": 1}],
        "topTools": [{"tool": "Walk", "count": 1, "avgHelpfulness": 3.0}],
    }
