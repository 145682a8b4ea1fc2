"""
HAVEN Domain Layer

Immutable records and enumerations for triage, episodes and insights.
These models carry no infrastructure dependencies.
"""

from haven.domain.models import (
    Episode,
    ReframeInput,
    ReframeResult,
    SafetyCheckResult,
    SafetyEvent,
    TriageInput,
    TriageResult,
    WeeklyInsight,
    WeeklyStats,
)
from haven.domain.enums import SafetyEventType, Severity, SuggestedFlow

__all__ = [
    "Episode",
    "ReframeInput",
    "ReframeResult",
    "SafetyCheckResult",
    "SafetyEvent",
    "TriageInput",
    "TriageResult",
    "WeeklyInsight",
    "WeeklyStats",
    "SafetyEventType",
    "Severity",
    "SuggestedFlow",
]
