"""
Thought Reframe Generator

Offers a validating sentence and a gentler alternative to an anxious
automatic thought. Remote first, then a fixed template.
"""

from typing import Optional

from haven.config.logging_config import get_logger
from haven.domain.enums.triage import ResultSource
from haven.domain.models.reframe import ReframeInput, ReframeResult
from haven.infrastructure.metrics import (
    track_generated_text,
    track_remote_failure,
)
from haven.infrastructure.remote.classifier import RemoteClassifier, RemoteClassifierError
from haven.services.remote_response import RemoteReframeBody, call_remote, parse_remote_json

logger = get_logger(__name__)


FALLBACK_BALANCED_THOUGHT = (
    "What would you tell a friend who had this same thought? "
    "Often we're kinder to others than to ourselves."
)


def fallback_reframe(reframe_input: ReframeInput) -> ReframeResult:
    return ReframeResult(
        validation=(
            f"It makes sense that you'd feel {reframe_input.emotion.lower()} "
            "in that situation."
        ),
        balanced_thought=FALLBACK_BALANCED_THOUGHT,
        source=ResultSource.FALLBACK,
    )


class ThoughtReframeGenerator:
    """
    CBT-style reframe of one automatic thought.

    Usage:
        generator = ThoughtReframeGenerator(classifier)
        result = await generator.reframe(ReframeInput(...))
    """

    def __init__(
        self,
        classifier: Optional[RemoteClassifier],
        *,
        timeout_seconds: float = 8.0,
    ) -> None:
        self._classifier = classifier
        self._timeout_seconds = timeout_seconds

    async def reframe(self, reframe_input: ReframeInput) -> ReframeResult:
        """Produce a reframe. Never raises for remote failures."""
        if self._classifier is None:
            track_generated_text("reframe", ResultSource.FALLBACK.value)
            return fallback_reframe(reframe_input)

        try:
            raw = await call_remote(
                self._classifier.generate_reframe(reframe_input.to_remote_payload()),
                operation="reframe",
                timeout_seconds=self._timeout_seconds,
            )
            body = parse_remote_json(raw, RemoteReframeBody)
        except RemoteClassifierError as e:
            track_remote_failure("reframe", e.kind)
            logger.warning(
                "Remote reframe failed, using template",
                classifier=self._classifier.name,
                failure=e.kind,
            )
            track_generated_text("reframe", ResultSource.FALLBACK.value)
            return fallback_reframe(reframe_input)

        track_generated_text("reframe", ResultSource.REMOTE.value)
        return ReframeResult(
            validation=body.validation,
            balanced_thought=body.balanced_thought,
            source=ResultSource.REMOTE,
        )
