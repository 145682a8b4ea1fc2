"""
Prompt Builder

Builds the classifier prompts for triage, weekly insights and thought
reframes from the wire payloads of each request.

SAFETY: Every prompt forbids diagnosis. Triage guidance bands are
rendered from the shared severity table so they cannot drift from the
deterministic fallback.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from haven.domain.severity_bands import SEVERITY_BANDS
from haven.domain.vocabulary import CARDIORESPIRATORY_SYMPTOMS, COGNITIVE_SYMPTOMS


@dataclass
class BuiltPrompt:
    """
    Complete prompt ready for an LLM provider.

    Attributes:
        system_prompt: Role and hard rules
        user_message: Request-specific content
        max_tokens: Suggested max tokens for the response
        temperature: Suggested temperature
        constraints: Extra rules appended to the system prompt
    """

    system_prompt: str
    user_message: str = ""
    max_tokens: int = 500
    temperature: float = 0.3
    constraints: list[str] = field(default_factory=list)

    @property
    def full_system_prompt(self) -> str:
        if not self.constraints:
            return self.system_prompt
        rules = "\n".join(f"- {c}" for c in self.constraints)
        return f"{self.system_prompt}\n\nAdditional rules:\n{rules}"

    def to_messages(self) -> list[dict]:
        """Convert to OpenAI-style message format."""
        return [
            {"role": "system", "content": self.full_system_prompt},
            {"role": "user", "content": self.user_message},
        ]


TRIAGE_SYSTEM_PROMPT = (
    "You are a mental health triage assistant. Based on the user's state, "
    "assess the anxiety severity and recommend an intervention. "
    "Never diagnose, only assess the current state."
)

INSIGHT_SYSTEM_PROMPT = (
    "You are a supportive anxiety coach. Generate a brief weekly insight "
    "and one small experiment suggestion."
)

REFRAME_SYSTEM_PROMPT = (
    "You are a gentle CBT coach helping someone reframe an anxious thought."
)


def _join_or(values: list[str], empty: str) -> str:
    return ", ".join(values) if values else empty


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(v) for v in value]


def render_severity_guidance() -> str:
    """Render the severity bands as prompt guidance lines."""
    lines = []
    for band in reversed(SEVERITY_BANDS):
        lower = max(band.lower, 1)
        lines.append(f"- {band.severity.value} ({lower}-{band.upper}): {band.description}")
    return "\n".join(lines)


def build_triage_prompt(payload: dict) -> BuiltPrompt:
    """
    Build the triage classification prompt.

    Args:
        payload: Triage request body (intensity, symptoms, triggers, userMessage)
    """
    symptoms = _string_list(payload.get("symptoms"))
    triggers = _string_list(payload.get("triggers"))
    user_message: Optional[str] = payload.get("userMessage")

    lines = [
        "User state:",
        f"- Anxiety intensity: {payload.get('intensity')}/10",
        f"- Physical symptoms: {_join_or(symptoms, 'None reported')}",
        f"- Triggers: {_join_or(triggers, 'None identified')}",
    ]
    if user_message:
        lines.append(f'- User message: "{user_message}"')

    lines.extend([
        "",
        "Respond with ONLY a JSON object (no markdown, no explanation):",
        "{",
        '  "severity": "mild" | "moderate" | "severe",',
        '  "suggestedFlow": "breathing" | "grounding" | "stabilize" | "reframe" | "check_in",',
        '  "reasoning": "Brief explanation (1 sentence)"',
        "}",
        "",
        "Guidelines:",
        render_severity_guidance(),
        "- If symptoms include "
        + " or ".join(f'"{s}"' for s in sorted(CARDIORESPIRATORY_SYMPTOMS))
        + ", lean toward grounding",
        "- If symptoms include "
        + " or ".join(f'"{s}"' for s in sorted(COGNITIVE_SYMPTOMS))
        + ", lean toward breathing",
        "- Never diagnose, only assess current state",
    ])

    return BuiltPrompt(
        system_prompt=TRIAGE_SYSTEM_PROMPT,
        user_message="\n".join(lines),
        max_tokens=500,
        temperature=0.3,
    )


def build_insight_prompt(payload: dict) -> BuiltPrompt:
    """
    Build the weekly insight prompt.

    Args:
        payload: Insight request body (episodeCount, avgIntensity, topTriggers, topTools)
    """
    triggers = [
        f"{t.get('trigger')} ({t.get('count')}x)"
        for t in payload.get("topTriggers") or []
        if isinstance(t, dict)
    ]
    tools = []
    for t in payload.get("topTools") or []:
        if not isinstance(t, dict):
            continue
        helpfulness = t.get("avgHelpfulness") or 0
        tools.append(
            f"{t.get('tool')} (used {t.get('count')}x, {float(helpfulness):.1f}/5 helpful)"
        )

    user_message = "\n".join([
        "This week's data:",
        f"- Total episodes: {payload.get('episodeCount')}",
        f"- Average intensity: {payload.get('avgIntensity')}/10",
        f"- Top triggers: {_join_or(triggers, 'None identified')}",
        f"- Most helpful tools: {_join_or(tools, 'None recorded')}",
        "",
        "Respond with ONLY a JSON object:",
        "{",
        '  "insight": "One encouraging observation about patterns (1-2 sentences, warm tone)",',
        '  "experiment": "One tiny, specific experiment to try next week (1 sentence, actionable)"',
        "}",
    ])

    return BuiltPrompt(
        system_prompt=INSIGHT_SYSTEM_PROMPT,
        user_message=user_message,
        max_tokens=500,
        temperature=0.7,
        constraints=[
            "Be warm and non-judgmental",
            "Focus on what's working, not what's wrong",
            "Make the experiment very small and doable",
            "Never diagnose or use clinical language",
            "If tools helped, celebrate that",
        ],
    )


def build_reframe_prompt(payload: dict) -> BuiltPrompt:
    """
    Build the thought reframe prompt.

    Args:
        payload: Reframe request body (situation, automaticThought, emotion)
    """
    user_message = "\n".join([
        f"Situation: {payload.get('situation')}",
        f'Automatic thought: "{payload.get("automaticThought")}"',
        f"Emotion felt: {payload.get('emotion')}",
        "",
        "Respond with ONLY a JSON object:",
        "{",
        '  "validation": "Brief validation of their feeling (1 sentence, warm)",',
        '  "balancedThought": "A more balanced alternative thought (1-2 sentences)"',
        "}",
    ])

    return BuiltPrompt(
        system_prompt=REFRAME_SYSTEM_PROMPT,
        user_message=user_message,
        max_tokens=500,
        temperature=0.7,
        constraints=[
            "First validate their emotion - it's real and makes sense",
            "Don't dismiss or minimize their concern",
            'Use "What if..." or "It\'s also possible that..." framing',
            "Keep it short and conversational",
            'Never say their thought is "wrong" or "irrational"',
        ],
    )
