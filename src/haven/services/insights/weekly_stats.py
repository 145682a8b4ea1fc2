"""
Weekly Stats Aggregation

Pure aggregation of recorded episodes into WeeklyStats. Window
selection is the caller's concern; everything passed in is counted.
"""

from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timezone, tzinfo
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from haven.domain.models.episode import Episode
from haven.domain.models.insight import HourCount, ToolUsage, TriggerCount, WeeklyStats

TOP_N = 3


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero (4.25 -> 4.3)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _local_hour(timestamp: datetime, tz: tzinfo) -> int:
    # Naive timestamps come back from SQLite and are stored as UTC
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return timestamp.astimezone(tz).hour


def compute_weekly_stats(
    episodes: Sequence[Episode],
    tz: Optional[tzinfo] = None,
) -> Optional[WeeklyStats]:
    """
    Aggregate episodes into weekly statistics.

    Ties keep first-seen order for triggers and tools, and hour order
    for time patterns.

    Args:
        episodes: Episodes in the window, any order
        tz: Timezone for hour-of-day buckets (UTC if omitted)

    Returns:
        WeeklyStats, or None when there are no episodes
    """
    if not episodes:
        return None

    tz = tz or timezone.utc

    average = sum(ep.intensity for ep in episodes) / len(episodes)

    trigger_counts: Counter[str] = Counter()
    tool_counts: Counter[str] = Counter()
    tool_ratings: dict[str, list[int]] = {}
    hour_counts: Counter[int] = Counter()

    for ep in episodes:
        trigger_counts.update(ep.triggers)
        for tool in ep.tools_used:
            tool_counts[tool] += 1
            ratings = tool_ratings.setdefault(tool, [])
            if ep.helpful_rating is not None:
                ratings.append(ep.helpful_rating)
        hour_counts[_local_hour(ep.timestamp, tz)] += 1

    top_triggers = tuple(
        TriggerCount(trigger=trigger, count=count)
        for trigger, count in sorted(trigger_counts.items(), key=lambda kv: -kv[1])[:TOP_N]
    )

    top_tools = []
    for tool, count in sorted(tool_counts.items(), key=lambda kv: -kv[1])[:TOP_N]:
        ratings = tool_ratings[tool]
        avg_helpfulness = round_one_decimal(sum(ratings) / len(ratings)) if ratings else 0.0
        top_tools.append(ToolUsage(tool=tool, count=count, avg_helpfulness=avg_helpfulness))

    time_patterns = tuple(
        HourCount(hour=hour, count=count)
        for hour, count in sorted(hour_counts.items(), key=lambda kv: (-kv[1], kv[0]))
    )

    return WeeklyStats(
        total_episodes=len(episodes),
        average_intensity=round_one_decimal(average),
        top_triggers=top_triggers,
        top_tools=tuple(top_tools),
        time_patterns=time_patterns,
    )
