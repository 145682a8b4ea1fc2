"""
Triage Coordinator

Decides severity and the next exercise flow for one panic-button
interaction.

SAFETY-CRITICAL: The local safety scan always runs first and a crisis
match returns before any network call. Remote classification is a
single bounded attempt; every failure falls back to the deterministic
intensity bands, so triage always produces a result.
"""

from haven.config.logging_config import get_logger
from haven.domain.enums.triage import ResultSource, Severity, SuggestedFlow
from haven.domain.models.triage import SafetyCheckResult, TriageInput, TriageResult
from haven.domain.severity_bands import band_for_intensity
from haven.infrastructure.metrics import (
    SAFETY_MATCHES_TOTAL,
    track_remote_failure,
    track_triage,
)
from haven.infrastructure.remote.classifier import RemoteClassifier, RemoteClassifierError
from haven.services.remote_response import RemoteTriageBody, call_remote, parse_remote_json
from haven.services.safety.safety_scanner import SafetyScanner

logger = get_logger(__name__)


FALLBACK_REASONING = "Fallback assessment based on intensity"


def assess_by_intensity(intensity: int) -> TriageResult:
    """
    Deterministic triage from intensity alone.

    Out-of-range intensities clamp to the nearest band.
    """
    band = band_for_intensity(intensity)
    return TriageResult(
        severity=band.severity,
        suggested_flow=band.fallback_flow,
        is_crisis=False,
        is_medical_concern=False,
        reasoning=FALLBACK_REASONING,
    )


def result_from_safety_check(check: SafetyCheckResult) -> TriageResult | None:
    """Map a safety scan to a short-circuit result, crisis first."""
    if check.is_crisis:
        return TriageResult.crisis()
    if check.is_medical_concern:
        return TriageResult.medical_concern()
    return None


class TriageCoordinator:
    """
    Safety gate, then remote classification, then fallback.

    The coordinator holds no per-call state; concurrent calls are
    independent and share only the immutable collaborators.

    Usage:
        coordinator = TriageCoordinator(classifier, timeout_seconds=8.0)
        result = await coordinator.triage(TriageInput(intensity=6))
    """

    def __init__(
        self,
        classifier: RemoteClassifier | None,
        *,
        timeout_seconds: float = 8.0,
    ) -> None:
        """
        Args:
            classifier: Remote classifier, or None to always use the fallback
            timeout_seconds: Bound on the single remote attempt
        """
        self._classifier = classifier
        self._timeout_seconds = timeout_seconds

    def screen(self, triage_input: TriageInput) -> TriageResult | None:
        """
        Run the local safety gate only.

        Synchronous and network-free. Returns the crisis or medical
        result, or None when the message is clear or absent.
        """
        if not triage_input.user_message:
            return None

        check = SafetyScanner.scan(triage_input.user_message)
        result = result_from_safety_check(check)

        if result is not None:
            kind = "crisis" if result.is_crisis else "medical"
            SAFETY_MATCHES_TOTAL.labels(kind=kind).inc()
            track_triage(ResultSource.SAFETY.value, result.severity.value)
            logger.warning(
                "Safety keywords detected, skipping remote classification",
                kind=kind,
                match_count=len(check.matched_keywords),
            )

        return result

    async def triage(self, triage_input: TriageInput) -> TriageResult:
        """
        Produce a triage result. Never raises for remote failures.

        Args:
            triage_input: Intensity, symptoms, triggers and optional message

        Returns:
            TriageResult from the safety gate, the classifier or the fallback
        """
        safety_result = self.screen(triage_input)
        if safety_result is not None:
            return safety_result

        if self._classifier is None:
            result = assess_by_intensity(triage_input.intensity)
            track_triage(ResultSource.FALLBACK.value, result.severity.value)
            return result

        try:
            result = await self._classify_remotely(triage_input)
        except RemoteClassifierError as e:
            track_remote_failure("triage", e.kind)
            logger.warning(
                "Remote triage failed, using fallback",
                classifier=self._classifier.name,
                failure=e.kind,
                error=str(e),
            )
            result = assess_by_intensity(triage_input.intensity)
            track_triage(ResultSource.FALLBACK.value, result.severity.value)
            return result

        track_triage(ResultSource.REMOTE.value, result.severity.value)
        return result

    async def _classify_remotely(self, triage_input: TriageInput) -> TriageResult:
        raw = await call_remote(
            self._classifier.classify_triage(triage_input.to_remote_payload()),
            operation="triage",
            timeout_seconds=self._timeout_seconds,
        )
        body = parse_remote_json(raw, RemoteTriageBody)
        return self._to_result(body)

    @staticmethod
    def _to_result(body: RemoteTriageBody) -> TriageResult:
        """
        Build a typed result from a validated remote body.

        Safety signals from the classifier are honored but normalized
        to the canonical safety results. Anything else must be a
        band severity paired with an exercise flow.
        """
        if (
            body.is_crisis
            or body.severity is Severity.CRISIS
            or body.suggested_flow is SuggestedFlow.CRISIS_SUPPORT
        ):
            return TriageResult.crisis(reasoning="Classifier flagged crisis")

        if body.is_medical_concern or body.suggested_flow is SuggestedFlow.MEDICAL_CHECK:
            return TriageResult.medical_concern(reasoning="Classifier flagged medical concern")

        return TriageResult(
            severity=body.severity,
            suggested_flow=body.suggested_flow,
            is_crisis=False,
            is_medical_concern=False,
            reasoning=body.reasoning,
        )
