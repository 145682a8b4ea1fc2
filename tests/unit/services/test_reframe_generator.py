"""
Unit Tests for Thought Reframe Generator

Tests the remote reframe and its templated fallback.
"""

from haven.domain.enums.triage import ResultSource
from haven.domain.models.reframe import ReframeInput
from haven.services.reframe import FALLBACK_BALANCED_THOUGHT, ThoughtReframeGenerator

THOUGHT = ReframeInput(
    situation="Friend didn't reply for two days",
    automatic_thought="They must be angry with me",
    emotion="Anxious",
)


async def test_remote_reframe_used(make_classifier) -> None:
    """A valid remote reframe is returned and the payload is camelCase."""
    classifier = make_classifier(
        reframe='{"validation": "That silence feels loud.", "balancedThought": "What if they are just busy?"}'
    )

    result = await ThoughtReframeGenerator(classifier).reframe(THOUGHT)

    assert result.validation == "That silence feels loud."
    assert result.balanced_thought == "What if they are just busy?"
    assert result.source is ResultSource.REMOTE
    assert classifier.payloads["reframe"] == [{
        "situation": "Friend didn't reply for two days",
        "automaticThought": "They must be angry with me",
        "emotion": "Anxious",
    }]


async def test_fallback_lowercases_emotion(failing_classifier) -> None:
    """The fallback validation names the emotion in lower case."""
    result = await ThoughtReframeGenerator(failing_classifier).reframe(THOUGHT)

    assert result.validation == "It makes sense that you'd feel anxious in that situation."
    assert result.balanced_thought == FALLBACK_BALANCED_THOUGHT
    assert result.source is ResultSource.FALLBACK


async def test_missing_field_falls_back(make_classifier) -> None:
    """A reply missing balancedThought falls back."""
    classifier = make_classifier(reframe='{"validation": "ok"}')

    result = await ThoughtReframeGenerator(classifier).reframe(THOUGHT)

    assert result.source is ResultSource.FALLBACK


async def test_timeout_falls_back(make_classifier) -> None:
    """A slow classifier falls back."""
    classifier = make_classifier(reframe='{"validation": "a", "balancedThought": "b"}', delay=5.0)

    result = await ThoughtReframeGenerator(classifier, timeout_seconds=0.05).reframe(THOUGHT)

    assert result.source is ResultSource.FALLBACK
