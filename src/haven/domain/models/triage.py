"""
Triage Domain Models

Immutable records passed between the safety scanner, the triage
coordinator and the API layer. None of them are persisted.
"""

from dataclasses import dataclass, field
from typing import Optional

from haven.domain.enums.triage import Severity, SuggestedFlow


@dataclass(frozen=True)
class TriageInput:
    """
    One panic-button interaction.

    Attributes:
        intensity: Self-reported distress, 0-10. Not re-validated here.
        symptoms: Physical sensations picked from the symptom vocabulary
        triggers: Situations the user associates with this episode
        user_message: Optional free text, the only field scanned for safety
    """

    intensity: int
    symptoms: frozenset[str] = field(default_factory=frozenset)
    triggers: frozenset[str] = field(default_factory=frozenset)
    user_message: Optional[str] = None

    def to_remote_payload(self) -> dict:
        """Request body sent to the remote classifier."""
        payload: dict = {
            "intensity": self.intensity,
            "symptoms": sorted(self.symptoms),
            "triggers": sorted(self.triggers),
        }
        if self.user_message:
            payload["userMessage"] = self.user_message
        return payload


@dataclass(frozen=True)
class SafetyCheckResult:
    """
    Result of scanning free text for safety keywords.

    A text may match both keyword sets. Downstream routing always
    gives crisis precedence over medical concern.

    Attributes:
        is_crisis: Self-harm or suicidal language matched
        is_medical_concern: Acute physical emergency language matched
        matched_keywords: Crisis matches first, then medical. For audit
            counts only, never shown to the user or logged verbatim.
    """

    is_crisis: bool = False
    is_medical_concern: bool = False
    matched_keywords: tuple[str, ...] = ()

    @property
    def has_match(self) -> bool:
        return self.is_crisis or self.is_medical_concern


@dataclass(frozen=True)
class TriageResult:
    """
    Triage decision consumed by the UI router.

    Invariants:
        is_crisis implies severity CRISIS and flow CRISIS_SUPPORT.
        is_medical_concern without crisis implies flow MEDICAL_CHECK.
    """

    severity: Severity
    suggested_flow: SuggestedFlow
    is_crisis: bool = False
    is_medical_concern: bool = False
    reasoning: str = ""

    def __post_init__(self) -> None:
        if self.is_crisis and (
            self.severity is not Severity.CRISIS
            or self.suggested_flow is not SuggestedFlow.CRISIS_SUPPORT
        ):
            raise ValueError("Crisis results must use crisis severity and crisis_support flow")
        if (
            self.is_medical_concern
            and not self.is_crisis
            and self.suggested_flow is not SuggestedFlow.MEDICAL_CHECK
        ):
            raise ValueError("Medical concern results must route to medical_check")

    @classmethod
    def crisis(cls, reasoning: str = "Crisis keywords detected") -> "TriageResult":
        return cls(
            severity=Severity.CRISIS,
            suggested_flow=SuggestedFlow.CRISIS_SUPPORT,
            is_crisis=True,
            is_medical_concern=False,
            reasoning=reasoning,
        )

    @classmethod
    def medical_concern(
        cls,
        reasoning: str = "Medical concern keywords detected",
    ) -> "TriageResult":
        return cls(
            severity=Severity.SEVERE,
            suggested_flow=SuggestedFlow.MEDICAL_CHECK,
            is_crisis=False,
            is_medical_concern=True,
            reasoning=reasoning,
        )

    def to_dict(self) -> dict:
        """Serialize using the wire field names."""
        return {
            "severity": self.severity.value,
            "suggestedFlow": self.suggested_flow.value,
            "isCrisis": self.is_crisis,
            "isMedicalConcern": self.is_medical_concern,
            "reasoning": self.reasoning,
        }
