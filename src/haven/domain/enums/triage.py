"""
Triage Enumerations

Severity levels, the exercise flows the UI can route to, and the
kinds of safety events kept in the local log.
"""

from enum import StrEnum


class Severity(StrEnum):
    """
    Distress severity assigned by triage.

    MILD, MODERATE and SEVERE come from intensity bands (or the remote
    classifier). CRISIS is only ever assigned when self-harm or suicidal
    language is detected.
    """

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRISIS = "crisis"


class SuggestedFlow(StrEnum):
    """
    Next screen the panic-button flow should present.

    STABILIZE is breathing followed by grounding, used for severe distress.
    CRISIS_SUPPORT and MEDICAL_CHECK are safety redirections, not exercises.
    """

    CHECK_IN = "check_in"
    BREATHING = "breathing"
    GROUNDING = "grounding"
    STABILIZE = "stabilize"
    REFRAME = "reframe"
    CRISIS_SUPPORT = "crisis_support"
    MEDICAL_CHECK = "medical_check"


class SafetyEventType(StrEnum):
    """Kinds of safety events recorded in the local log."""

    CRISIS_DETECTED = "crisis_detected"
    MEDICAL_WARNING = "medical_warning"
    CRISIS_SCREEN_SHOWN = "crisis_screen_shown"


class ResultSource(StrEnum):
    """Which path produced a triage, insight or reframe result."""

    SAFETY = "safety"
    REMOTE = "remote"
    FALLBACK = "fallback"
    NO_EPISODES = "no_episodes"
