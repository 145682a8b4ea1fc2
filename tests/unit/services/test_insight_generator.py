"""
Unit Tests for Weekly Insight Generator

Tests the empty-week short circuit, the remote insight and its fallback.
"""

import pytest

from haven.domain.enums.triage import ResultSource
from haven.domain.models.insight import ToolUsage, TriggerCount, WeeklyStats
from haven.services.insights import (
    NO_EPISODES_EXPERIMENT,
    NO_EPISODES_INSIGHT,
    WeeklyInsightGenerator,
)


@pytest.fixture
def week() -> WeeklyStats:
    return WeeklyStats(
        total_episodes=4,
        average_intensity=6.5,
        top_triggers=(TriggerCount("Work", 3),),
        top_tools=(ToolUsage("Box breathing", 3, 4.0), ToolUsage("Walk", 1, 0.0)),
    )


class TestNoEpisodes:
    """Weeks with nothing recorded."""

    @pytest.mark.parametrize("stats", [None, WeeklyStats(total_episodes=0, average_intensity=0.0)])
    async def test_fixed_pair_without_remote_call(self, make_classifier, stats) -> None:
        """An empty week returns the fixed pair without calling out."""
        classifier = make_classifier(insight='{"insight": "a", "experiment": "b"}')

        insight = await WeeklyInsightGenerator(classifier).generate(stats)

        assert classifier.calls["insight"] == 0
        assert insight.insight == NO_EPISODES_INSIGHT
        assert insight.experiment == NO_EPISODES_EXPERIMENT
        assert insight.source is ResultSource.NO_EPISODES


class TestRemote:
    """Tests for the remote path."""

    async def test_remote_insight_used(self, make_classifier, week) -> None:
        """A valid remote insight is returned."""
        classifier = make_classifier(
            insight='Sure! {"insight": "Mornings got calmer.", "experiment": "Breathe before standup."}'
        )

        insight = await WeeklyInsightGenerator(classifier).generate(week)

        assert insight.insight == "Mornings got calmer."
        assert insight.experiment == "Breathe before standup."
        assert insight.source is ResultSource.REMOTE

    async def test_payload_sent_to_remote(self, make_classifier, week) -> None:
        """The classifier receives the camelCase stats payload."""
        classifier = make_classifier(insight='{"insight": "a", "experiment": "b"}')

        await WeeklyInsightGenerator(classifier).generate(week)

        payload = classifier.payloads["insight"][0]
        assert payload["episodeCount"] == 4
        assert payload["avgIntensity"] == "6.5"
        assert payload["topTriggers"] == [{"trigger": "Work", "count": 3}]
        assert payload["topTools"][0] == {"tool": "Box breathing", "count": 3, "avgHelpfulness": 4.0}

    async def test_clinical_language_rejected(self, make_classifier, week) -> None:
        """Diagnostic language in a reply forces the fallback."""
        classifier = make_classifier(
            insight='{"insight": "This looks like panic disorder.", "experiment": "See someone."}'
        )

        insight = await WeeklyInsightGenerator(classifier).generate(week)

        assert insight.source is ResultSource.FALLBACK


class TestFallback:
    """Tests for the templated fallback."""

    async def test_fallback_embeds_count_and_average(self, failing_classifier, week) -> None:
        """The fallback names the count, average and top tool."""
        insight = await WeeklyInsightGenerator(failing_classifier).generate(week)

        assert failing_classifier.calls["insight"] == 1
        assert insight.source is ResultSource.FALLBACK
        assert "4 episodes" in insight.insight
        assert "6.5" in insight.insight
        assert insight.experiment == "Keep using Box breathing - it seems to be helping you."

    async def test_singular_episode(self, failing_classifier) -> None:
        """One episode reads singular and uses the default experiment."""
        stats = WeeklyStats(total_episodes=1, average_intensity=3.0)

        insight = await WeeklyInsightGenerator(failing_classifier).generate(stats)

        assert insight.insight.startswith("You logged 1 episode this week")
        assert "3.0" in insight.insight
        assert insight.experiment == "Try the box breathing exercise next time you feel anxious."

    async def test_timeout_falls_back(self, make_classifier, week) -> None:
        """A slow classifier falls back."""
        classifier = make_classifier(insight='{"insight": "a", "experiment": "b"}', delay=5.0)

        insight = await WeeklyInsightGenerator(classifier, timeout_seconds=0.05).generate(week)

        assert insight.source is ResultSource.FALLBACK

    @pytest.mark.parametrize("reply", ["no json", '{"insight": "only half"}', '{"insight": 1, "experiment": 2}'])
    async def test_malformed_falls_back(self, make_classifier, week, reply) -> None:
        """Unparseable replies fall back."""
        insight = await WeeklyInsightGenerator(make_classifier(insight=reply)).generate(week)

        assert insight.source is ResultSource.FALLBACK
        assert "4 episodes" in insight.insight

    async def test_no_classifier(self, week) -> None:
        """No classifier configured falls back without error."""
        insight = await WeeklyInsightGenerator(None).generate(week)

        assert insight.source is ResultSource.FALLBACK
