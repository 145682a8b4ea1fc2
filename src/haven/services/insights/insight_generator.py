"""
Weekly Insight Generator

Turns a week of episode statistics into one encouraging observation
and one small experiment.

ARCHITECTURE: Same remote-with-deterministic-fallback shape as triage.
A week with no episodes never reaches the classifier, and any remote
failure produces a templated insight built from the numbers alone.
"""

from typing import Optional

from haven.config.logging_config import get_logger
from haven.domain.enums.triage import ResultSource
from haven.domain.models.insight import WeeklyInsight, WeeklyStats
from haven.infrastructure.metrics import (
    track_generated_text,
    track_remote_failure,
)
from haven.infrastructure.remote.classifier import (
    RemoteClassifier,
    RemoteClassifierError,
    RemoteMalformed,
)
from haven.services.remote_response import RemoteInsightBody, call_remote, parse_remote_json

logger = get_logger(__name__)


NO_EPISODES_INSIGHT = "No episodes recorded this week. That's great progress!"
NO_EPISODES_EXPERIMENT = (
    "Try noting moments when you felt calm and what contributed to that feeling."
)
DEFAULT_EXPERIMENT = "Try the box breathing exercise next time you feel anxious."

# Remote narratives must stay non-clinical; matching text is discarded
CLINICAL_TERMS: tuple[str, ...] = (
    "diagnos",
    "disorder",
    "clinical",
    "psychiatr",
    "patholog",
    "syndrome",
    "medication",
    "prescri",
)


def no_episodes_insight() -> WeeklyInsight:
    return WeeklyInsight(
        insight=NO_EPISODES_INSIGHT,
        experiment=NO_EPISODES_EXPERIMENT,
        source=ResultSource.NO_EPISODES,
    )


def fallback_insight(stats: WeeklyStats) -> WeeklyInsight:
    """Templated insight built only from the statistics."""
    count = stats.total_episodes
    plural = "" if count == 1 else "s"
    insight = (
        f"You logged {count} episode{plural} this week with an average "
        f"intensity of {stats.average_intensity:.1f}. "
        "You're building awareness of your patterns."
    )

    if stats.top_tools:
        experiment = f"Keep using {stats.top_tools[0].tool} - it seems to be helping you."
    else:
        experiment = DEFAULT_EXPERIMENT

    return WeeklyInsight(insight=insight, experiment=experiment, source=ResultSource.FALLBACK)


def find_clinical_terms(text: str) -> list[str]:
    lowered = text.lower()
    return [term for term in CLINICAL_TERMS if term in lowered]


class WeeklyInsightGenerator:
    """
    Generates the weekly insight shown on the progress screen.

    Usage:
        generator = WeeklyInsightGenerator(classifier, timeout_seconds=8.0)
        insight = await generator.generate(stats)
    """

    def __init__(
        self,
        classifier: Optional[RemoteClassifier],
        *,
        timeout_seconds: float = 8.0,
    ) -> None:
        self._classifier = classifier
        self._timeout_seconds = timeout_seconds

    async def generate(self, stats: Optional[WeeklyStats]) -> WeeklyInsight:
        """
        Produce a weekly insight. Never raises for remote failures.

        Args:
            stats: Aggregated week, or None when nothing was recorded

        Returns:
            WeeklyInsight tagged with the path that produced it
        """
        if stats is None or stats.total_episodes <= 0:
            track_generated_text("insight", ResultSource.NO_EPISODES.value)
            return no_episodes_insight()

        if self._classifier is None:
            track_generated_text("insight", ResultSource.FALLBACK.value)
            return fallback_insight(stats)

        try:
            insight = await self._generate_remotely(stats)
        except RemoteClassifierError as e:
            track_remote_failure("insight", e.kind)
            logger.warning(
                "Remote insight failed, using template",
                classifier=self._classifier.name,
                failure=e.kind,
                error=str(e),
            )
            track_generated_text("insight", ResultSource.FALLBACK.value)
            return fallback_insight(stats)

        track_generated_text("insight", ResultSource.REMOTE.value)
        return insight

    async def _generate_remotely(self, stats: WeeklyStats) -> WeeklyInsight:
        raw = await call_remote(
            self._classifier.generate_insight(stats.to_remote_payload()),
            operation="insight",
            timeout_seconds=self._timeout_seconds,
        )
        body = parse_remote_json(raw, RemoteInsightBody)

        terms = find_clinical_terms(f"{body.insight} {body.experiment}")
        if terms:
            raise RemoteMalformed(f"Insight used clinical language ({len(terms)} terms)")

        return WeeklyInsight(
            insight=body.insight,
            experiment=body.experiment,
            source=ResultSource.REMOTE,
        )
