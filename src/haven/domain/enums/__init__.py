"""Domain enums package."""

from haven.domain.enums.triage import (
    ResultSource,
    SafetyEventType,
    Severity,
    SuggestedFlow,
)

__all__ = [
    "ResultSource",
    "SafetyEventType",
    "Severity",
    "SuggestedFlow",
]
