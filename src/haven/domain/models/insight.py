"""
Weekly Insight Domain Models

Aggregated episode statistics for the trailing week and the narrative
insight generated from them.
"""

from dataclasses import dataclass, field

from haven.domain.enums.triage import ResultSource


@dataclass(frozen=True)
class TriggerCount:
    trigger: str
    count: int

    def to_dict(self) -> dict:
        return {"trigger": self.trigger, "count": self.count}


@dataclass(frozen=True)
class ToolUsage:
    """
    How often a coping tool was used and how helpful it was rated.

    avg_helpfulness is the mean 1-5 rating over the uses that carried
    a rating, or 0 when none did.
    """

    tool: str
    count: int
    avg_helpfulness: float = 0.0

    def to_dict(self) -> dict:
        return {
            "tool": self.tool,
            "count": self.count,
            "avgHelpfulness": self.avg_helpfulness,
        }


@dataclass(frozen=True)
class HourCount:
    hour: int
    count: int

    def to_dict(self) -> dict:
        return {"hour": self.hour, "count": self.count}


@dataclass(frozen=True)
class WeeklyStats:
    """
    Episode statistics over the trailing seven days.

    Attributes:
        total_episodes: Episodes in the window
        average_intensity: Mean intensity, rounded to one decimal
        top_triggers: Up to 3 triggers, most frequent first
        top_tools: Up to 3 tools, most used first
        time_patterns: One bucket per hour of day, busiest first
    """

    total_episodes: int
    average_intensity: float
    top_triggers: tuple[TriggerCount, ...] = ()
    top_tools: tuple[ToolUsage, ...] = ()
    time_patterns: tuple[HourCount, ...] = ()

    def to_remote_payload(self) -> dict:
        """Request body sent to the remote classifier for an insight."""
        return {
            "episodeCount": self.total_episodes,
            "avgIntensity": f"{self.average_intensity:.1f}",
            "topTriggers": [t.to_dict() for t in self.top_triggers],
            "topTools": [t.to_dict() for t in self.top_tools],
        }

    def to_dict(self) -> dict:
        return {
            "totalEpisodes": self.total_episodes,
            "averageIntensity": self.average_intensity,
            "topTriggers": [t.to_dict() for t in self.top_triggers],
            "topTools": [t.to_dict() for t in self.top_tools],
            "timePatterns": [h.to_dict() for h in self.time_patterns],
        }


@dataclass(frozen=True)
class WeeklyInsight:
    """Encouraging observation plus one small experiment for next week."""

    insight: str
    experiment: str
    source: ResultSource = field(default=ResultSource.FALLBACK)

    def to_dict(self) -> dict:
        return {
            "insight": self.insight,
            "experiment": self.experiment,
            "source": self.source.value,
        }
