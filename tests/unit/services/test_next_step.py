"""
Unit Tests for Next-step Suggestions

Tests the rule-based follow-ups shown after an exercise.
"""

from haven.services.triage import suggest_next_steps


def test_high_intensity_no_tools_suggests_exercises() -> None:
    """High intensity with no tools suggests breathing then grounding."""
    steps = suggest_next_steps(8, [], 2)

    assert steps[:2] == ["Try a breathing exercise", "Try grounding (5-4-3-2-1)"]
    assert len(steps) <= 4


def test_breathing_skipped_after_breathing_tool() -> None:
    """Breathing is not suggested after a breathing tool."""
    steps = suggest_next_steps(8, ["Box breathing"], 2)

    assert "Try a breathing exercise" not in steps
    assert steps[0] == "Try grounding (5-4-3-2-1)"


def test_grounding_skipped_after_grounding_tool() -> None:
    """Grounding is not suggested after the grounding tool."""
    steps = suggest_next_steps(8, ["5-4-3-2-1 grounding"], 2)

    assert "Try grounding (5-4-3-2-1)" not in steps
    assert steps[0] == "Try a breathing exercise"


def test_low_intensity_suggests_self_care() -> None:
    """Low intensity suggests water, a walk and reaching out."""
    assert suggest_next_steps(3, [], 1) == [
        "Drink some water",
        "Take a short walk",
        "Message someone you trust",
    ]


def test_two_tools_at_high_intensity_adds_self_care() -> None:
    """Two tools used adds self-care even at high intensity."""
    steps = suggest_next_steps(7, ["Paced breathing", "5-4-3-2-1 grounding"], 2)

    assert steps == ["Drink some water", "Take a short walk", "Message someone you trust"]


def test_long_episode_adds_break() -> None:
    """Over ten minutes above intensity 3 suggests a break."""
    steps = suggest_next_steps(4, [], 15)

    assert "It's okay to take a break" in steps
    assert len(steps) == 4


def test_padding_when_few_suggestions() -> None:
    """Fewer than three suggestions are padded with easy options."""
    steps = suggest_next_steps(9, ["Box breathing"], 1)

    assert steps == [
        "Try grounding (5-4-3-2-1)",
        "Do a small, easy task",
        "Listen to calming music",
    ]


def test_never_more_than_four() -> None:
    """Suggestions are capped at four."""
    steps = suggest_next_steps(8, ["Walk", "Music"], 30)

    assert len(steps) == 4
    assert steps[0] == "Try a breathing exercise"
