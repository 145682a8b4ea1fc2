"""
Unit Tests for Safety Scanner

Crisis and medical keyword detection, including precedence and the
no-match cases.
"""

import pytest

from haven.services.safety import SafetyScanner, check_for_crisis
from haven.services.safety.safety_scanner import CRISIS_KEYWORDS, MEDICAL_KEYWORDS


class TestCrisisDetection:
    """Any crisis keyword, any case, any position."""

    @pytest.mark.parametrize("keyword", CRISIS_KEYWORDS)
    def test_every_crisis_keyword_detected(self, keyword) -> None:
        """Every crisis keyword is found regardless of case."""
        result = SafetyScanner.scan(f"lately {keyword.upper()} is all I think about")

        assert result.is_crisis is True
        assert keyword in result.matched_keywords

    def test_keyword_at_start_and_end(self) -> None:
        """Keywords match at either end of the message."""
        assert SafetyScanner.scan("Hopeless").is_crisis
        assert SafetyScanner.scan("i just want to die").is_crisis

    def test_substring_without_word_boundary(self) -> None:
        """Matching needs no word boundary."""
        assert SafetyScanner.scan("been...cutting...again").is_crisis

    def test_curly_apostrophe_matches(self) -> None:
        """Typographic apostrophes match the plain keyword."""
        result = SafetyScanner.scan("I can’t go on like this")

        assert result.is_crisis
        assert "can't go on" in result.matched_keywords


class TestMedicalDetection:
    """Medical keywords without crisis language."""

    @pytest.mark.parametrize("keyword", MEDICAL_KEYWORDS)
    def test_medical_only_is_not_crisis(self, keyword) -> None:
        """Medical keywords alone flag a medical concern, not a crisis."""
        result = SafetyScanner.scan(f"I have {keyword} right now")

        assert result.is_crisis is False
        assert result.is_medical_concern is True

    def test_cannot_breathe_variants(self) -> None:
        """Both breathing phrasings are medical concerns."""
        assert SafetyScanner.scan("I CAN'T BREATHE").is_medical_concern
        assert SafetyScanner.scan("i cannot breathe properly").is_medical_concern


class TestPrecedence:
    """Messages matching both keyword sets."""

    def test_both_sets_flag_crisis(self) -> None:
        """A message can be both crisis and medical."""
        result = SafetyScanner.scan("chest pain and I want to end it all")

        assert result.is_crisis is True
        assert result.is_medical_concern is True

    def test_crisis_matches_listed_first(self) -> None:
        """Crisis matches precede medical matches."""
        result = SafetyScanner.scan("chest pain, feeling hopeless")

        assert result.matched_keywords == ("hopeless", "chest pain")

    def test_all_matches_recorded(self) -> None:
        """Every match is recorded, not only the first."""
        result = SafetyScanner.scan("suicidal thoughts, want to die, fainting")

        assert set(result.matched_keywords) == {"suicidal", "want to die", "fainting"}


class TestNoMatch:
    """Inputs that must never flag."""

    @pytest.mark.parametrize("text", [None, "", "   ", "I feel a bit tense before my exam"])
    def test_clear_text(self, text) -> None:
        """Empty, missing and calm text match nothing."""
        result = SafetyScanner.scan(text)

        assert result.is_crisis is False
        assert result.is_medical_concern is False
        assert result.matched_keywords == ()
        assert result.has_match is False

    def test_non_string_does_not_raise(self) -> None:
        """Non-string input is treated as no match."""
        result = SafetyScanner.scan(42)  # type: ignore[arg-type]

        assert result.has_match is False

    def test_module_shortcut(self) -> None:
        """check_for_crisis delegates to the scanner."""
        assert check_for_crisis("better off dead").is_crisis
