"""
Next-step Suggestions

Rule-based follow-ups offered after an exercise. No remote call.
"""

from collections.abc import Iterable

from haven.domain.vocabulary import BREATHING_TOOLS, GROUNDING_TOOL

MAX_SUGGESTIONS = 4


def suggest_next_steps(
    intensity: int,
    tools_used: Iterable[str],
    minutes_since_start: float,
) -> list[str]:
    """
    Suggest up to four next steps.

    Args:
        intensity: Current distress, 0-10
        tools_used: Tools already tried in this episode
        minutes_since_start: Time since the panic button was pressed

    Returns:
        Ordered suggestions, most relevant first
    """
    used = list(tools_used)
    suggestions: list[str] = []

    if intensity > 5:
        if not BREATHING_TOOLS.intersection(used):
            suggestions.append("Try a breathing exercise")
        if GROUNDING_TOOL not in used:
            suggestions.append("Try grounding (5-4-3-2-1)")

    if intensity <= 5 or len(used) >= 2:
        suggestions.extend([
            "Drink some water",
            "Take a short walk",
            "Message someone you trust",
        ])

    if minutes_since_start > 10 and intensity > 3:
        suggestions.append("It's okay to take a break")

    if len(suggestions) < 3:
        suggestions.extend([
            "Do a small, easy task",
            "Listen to calming music",
        ])

    return suggestions[:MAX_SUGGESTIONS]
