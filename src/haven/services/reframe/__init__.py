"""Thought reframe service."""

from haven.services.reframe.reframe_generator import (
    FALLBACK_BALANCED_THOUGHT,
    ThoughtReframeGenerator,
    fallback_reframe,
)

__all__ = ["FALLBACK_BALANCED_THOUGHT", "ThoughtReframeGenerator", "fallback_reframe"]
