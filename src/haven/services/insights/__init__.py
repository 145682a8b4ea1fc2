"""Weekly statistics and insight services."""

from haven.services.insights.insight_generator import (
    NO_EPISODES_EXPERIMENT,
    NO_EPISODES_INSIGHT,
    WeeklyInsightGenerator,
    fallback_insight,
)
from haven.services.insights.weekly_stats import compute_weekly_stats

__all__ = [
    "NO_EPISODES_EXPERIMENT",
    "NO_EPISODES_INSIGHT",
    "WeeklyInsightGenerator",
    "compute_weekly_stats",
    "fallback_insight",
]
