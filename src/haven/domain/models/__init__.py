"""Domain models package."""

from haven.domain.models.triage import TriageInput, SafetyCheckResult, TriageResult
from haven.domain.models.episode import Episode, SafetyEvent
from haven.domain.models.insight import (
    HourCount,
    ToolUsage,
    TriggerCount,
    WeeklyInsight,
    WeeklyStats,
)
from haven.domain.models.reframe import ReframeInput, ReframeResult

__all__ = [
    # Triage
    "TriageInput",
    "SafetyCheckResult",
    "TriageResult",
    # Episode store records
    "Episode",
    "SafetyEvent",
    # Weekly insight
    "HourCount",
    "ToolUsage",
    "TriggerCount",
    "WeeklyInsight",
    "WeeklyStats",
    # Reframe
    "ReframeInput",
    "ReframeResult",
]
