"""
Severity Bands

Single table of intensity thresholds shared by the deterministic
fallback and by the guidance text sent to the remote classifier.
Changing a threshold here changes both.
"""

from dataclasses import dataclass

from haven.domain.enums.triage import Severity, SuggestedFlow


MIN_INTENSITY = 0
MAX_INTENSITY = 10


@dataclass(frozen=True)
class SeverityBand:
    """
    An inclusive intensity range and the flows suited to it.

    Attributes:
        severity: Severity assigned to intensities in the band
        lower: Lowest intensity in the band
        upper: Highest intensity in the band
        fallback_flow: Flow chosen when no remote classification is available
        guidance_flows: Flows the remote classifier is told to prefer
        description: Plain-language summary used in the remote prompt
    """

    severity: Severity
    lower: int
    upper: int
    fallback_flow: SuggestedFlow
    guidance_flows: tuple[SuggestedFlow, ...]
    description: str


# Ordered from most to least severe
SEVERITY_BANDS: tuple[SeverityBand, ...] = (
    SeverityBand(
        severity=Severity.SEVERE,
        lower=7,
        upper=MAX_INTENSITY,
        fallback_flow=SuggestedFlow.STABILIZE,
        guidance_flows=(SuggestedFlow.STABILIZE,),
        description="High distress, suggest stabilize (breathing + grounding combined)",
    ),
    SeverityBand(
        severity=Severity.MODERATE,
        lower=4,
        upper=6,
        fallback_flow=SuggestedFlow.BREATHING,
        guidance_flows=(SuggestedFlow.BREATHING, SuggestedFlow.GROUNDING),
        description="Notable distress, suggest breathing or grounding",
    ),
    SeverityBand(
        severity=Severity.MILD,
        lower=MIN_INTENSITY,
        upper=3,
        fallback_flow=SuggestedFlow.BREATHING,
        guidance_flows=(SuggestedFlow.CHECK_IN, SuggestedFlow.BREATHING),
        description="Manageable anxiety, suggest check_in or breathing",
    ),
)


def band_for_intensity(intensity: int) -> SeverityBand:
    """
    Find the band for an intensity, clamping out-of-range values.

    Intensities above the scale land in the top band and anything
    below it in the bottom band. Never raises.
    """
    clamped = max(MIN_INTENSITY, min(MAX_INTENSITY, intensity))
    for band in SEVERITY_BANDS:
        if clamped >= band.lower:
            return band
    return SEVERITY_BANDS[-1]
