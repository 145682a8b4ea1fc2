"""Triage services package."""

from haven.services.triage.triage_coordinator import (
    FALLBACK_REASONING,
    TriageCoordinator,
    assess_by_intensity,
)
from haven.services.triage.next_step import suggest_next_steps

__all__ = [
    "FALLBACK_REASONING",
    "TriageCoordinator",
    "assess_by_intensity",
    "suggest_next_steps",
]
