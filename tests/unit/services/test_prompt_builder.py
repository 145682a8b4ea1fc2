"""
Unit Tests for Prompt Builder

Tests the classifier prompts built from request payloads.
"""

from haven.services.prompt import build_insight_prompt, build_reframe_prompt, build_triage_prompt


def test_triage_prompt_lists_state() -> None:
    """The triage prompt carries intensity, symptoms, message and guidance."""
    prompt = build_triage_prompt({
        "intensity": 6,
        "symptoms": ["Racing heart", "Sweating"],
        "triggers": [],
        "userMessage": "my boss called",
    })

    assert "Anxiety intensity: 6/10" in prompt.user_message
    assert "Racing heart, Sweating" in prompt.user_message
    assert "Triggers: None identified" in prompt.user_message
    assert 'User message: "my boss called"' in prompt.user_message
    assert "moderate (4-6)" in prompt.user_message
    assert "lean toward grounding" in prompt.user_message
    assert "Never diagnose" in prompt.user_message


def test_triage_prompt_omits_absent_message() -> None:
    """No message line is added without a message."""
    prompt = build_triage_prompt({"intensity": 2, "symptoms": [], "triggers": []})

    assert "User message" not in prompt.user_message
    assert "Physical symptoms: None reported" in prompt.user_message


def test_insight_prompt_formats_tools() -> None:
    """The insight prompt formats triggers and tool helpfulness."""
    prompt = build_insight_prompt({
        "episodeCount": 3,
        "avgIntensity": "5.3",
        "topTriggers": [{"trigger": "Work", "count": 2}],
        "topTools": [{"tool": "Walk", "count": 2, "avgHelpfulness": 4}],
    })

    assert "Total episodes: 3" in prompt.user_message
    assert "Average intensity: 5.3/10" in prompt.user_message
    assert "Work (2x)" in prompt.user_message
    assert "Walk (used 2x, 4.0/5 helpful)" in prompt.user_message
    assert prompt.temperature == 0.7


def test_insight_prompt_tolerates_junk_lists() -> None:
    """Malformed lists render as none recorded."""
    prompt = build_insight_prompt({"episodeCount": 1, "topTriggers": "Work", "topTools": [None]})

    assert "Top triggers: None identified" in prompt.user_message
    assert "Most helpful tools: None recorded" in prompt.user_message


def test_reframe_prompt() -> None:
    """The reframe prompt quotes the thought and asks for JSON."""
    prompt = build_reframe_prompt({
        "situation": "Missed a call",
        "automaticThought": "I ruin everything",
        "emotion": "Guilty",
    })

    assert 'Automatic thought: "I ruin everything"' in prompt.user_message
    assert "balancedThought" in prompt.user_message
    assert prompt.to_messages()[0]["role"] == "system"
