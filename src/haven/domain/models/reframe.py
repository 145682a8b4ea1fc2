"""Thought reframe request and result."""

from dataclasses import dataclass

from haven.domain.enums.triage import ResultSource


@dataclass(frozen=True)
class ReframeInput:
    situation: str
    automatic_thought: str
    emotion: str

    def to_remote_payload(self) -> dict:
        return {
            "situation": self.situation,
            "automaticThought": self.automatic_thought,
            "emotion": self.emotion,
        }


@dataclass(frozen=True)
class ReframeResult:
    validation: str
    balanced_thought: str
    source: ResultSource = ResultSource.FALLBACK

    def to_dict(self) -> dict:
        return {
            "validation": self.validation,
            "balancedThought": self.balanced_thought,
            "source": self.source.value,
        }
