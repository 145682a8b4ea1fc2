"""Classifier prompt construction."""

from haven.services.prompt.prompt_builder import (
    BuiltPrompt,
    build_insight_prompt,
    build_reframe_prompt,
    build_triage_prompt,
)

__all__ = [
    "BuiltPrompt",
    "build_insight_prompt",
    "build_reframe_prompt",
    "build_triage_prompt",
]
