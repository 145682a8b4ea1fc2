"""
Safety Scanner

Keyword screen for crisis (self-harm, suicidal ideation) and acute
medical-emergency language in user free text.

SAFETY-CRITICAL: This scan runs locally and synchronously before any
remote call. It must never raise and never depend on the network.
False negatives are worse than false positives.
"""

from typing import Optional

from haven.domain.models.triage import SafetyCheckResult


# Substring match after case folding, no word boundaries
CRISIS_KEYWORDS: tuple[str, ...] = (
    "suicide",
    "suicidal",
    "kill myself",
    "end my life",
    "end it all",
    "want to die",
    "better off dead",
    "self-harm",
    "self harm",
    "hurt myself",
    "cutting",
    "can't go on",
    "cannot go on",
    "no reason to live",
    "give up",
    "hopeless",
)

MEDICAL_KEYWORDS: tuple[str, ...] = (
    "chest pain",
    "heart attack",
    "can't breathe",
    "cannot breathe",
    "passing out",
    "fainting",
    "fainted",
    "blacking out",
    "numbness",
    "severe pain",
    "emergency",
)

# Typographic apostrophes phone keyboards insert in "can't"
_APOSTROPHES = str.maketrans({"’": "'", "‘": "'", "ʼ": "'"})


def normalize_text(text: str) -> str:
    """Case-fold and unify apostrophes so keywords match as typed."""
    return text.casefold().translate(_APOSTROPHES)


class SafetyScanner:
    """
    Crisis and medical-concern keyword scanner.

    Every keyword in both sets is checked against the whole text and
    all matches are kept, crisis matches first.

    Usage:
        result = SafetyScanner.scan("I can't go on")
        if result.is_crisis:
            ...
    """

    CRISIS_KEYWORDS = CRISIS_KEYWORDS
    MEDICAL_KEYWORDS = MEDICAL_KEYWORDS

    @classmethod
    def scan(cls, text: Optional[str]) -> SafetyCheckResult:
        """
        Scan free text for safety keywords.

        Args:
            text: Raw user input; None or empty means no match

        Returns:
            SafetyCheckResult with both flags and the matched keywords
        """
        if not text or not isinstance(text, str):
            return SafetyCheckResult()

        normalized = normalize_text(text)

        matched_crisis = [k for k in cls.CRISIS_KEYWORDS if k in normalized]
        matched_medical = [k for k in cls.MEDICAL_KEYWORDS if k in normalized]

        return SafetyCheckResult(
            is_crisis=bool(matched_crisis),
            is_medical_concern=bool(matched_medical),
            matched_keywords=tuple(matched_crisis + matched_medical),
        )


def check_for_crisis(text: Optional[str]) -> SafetyCheckResult:
    """Module-level shortcut for SafetyScanner.scan."""
    return SafetyScanner.scan(text)
