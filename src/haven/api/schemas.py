"""
Shared Request Schemas

camelCase wire bodies accepted by both the classifier endpoints and
the app API. Range checks live here; the core clamps instead.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from haven.domain.models.insight import ToolUsage, TriggerCount, WeeklyStats
from haven.domain.models.reframe import ReframeInput
from haven.domain.models.triage import TriageInput


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class TriageRequest(CamelModel):
    """Triage request body."""

    intensity: int = Field(..., ge=0, le=10, description="Self-reported distress, 0-10")
    symptoms: list[str] = Field(default_factory=list)
    triggers: list[str] = Field(default_factory=list)
    user_message: Optional[str] = Field(
        default=None,
        alias="userMessage",
        max_length=4000,
        description="Optional free text, the only field scanned for safety keywords",
    )

    def to_input(self) -> TriageInput:
        return TriageInput(
            intensity=self.intensity,
            symptoms=frozenset(self.symptoms),
            triggers=frozenset(self.triggers),
            user_message=self.user_message,
        )


class TriggerCountBody(CamelModel):
    trigger: str
    count: int = Field(..., ge=0)


class ToolUsageBody(CamelModel):
    tool: str
    count: int = Field(..., ge=0)
    avg_helpfulness: float = Field(default=0.0, alias="avgHelpfulness", ge=0.0, le=5.0)


class InsightRequest(CamelModel):
    """Weekly insight request body. avgIntensity may arrive as a string."""

    episode_count: int = Field(..., ge=0, alias="episodeCount")
    avg_intensity: float = Field(default=0.0, alias="avgIntensity")
    top_triggers: list[TriggerCountBody] = Field(default_factory=list, alias="topTriggers")
    top_tools: list[ToolUsageBody] = Field(default_factory=list, alias="topTools")

    def to_stats(self) -> WeeklyStats:
        return WeeklyStats(
            total_episodes=self.episode_count,
            average_intensity=self.avg_intensity,
            top_triggers=tuple(
                TriggerCount(trigger=t.trigger, count=t.count) for t in self.top_triggers
            ),
            top_tools=tuple(
                ToolUsage(tool=t.tool, count=t.count, avg_helpfulness=t.avg_helpfulness)
                for t in self.top_tools
            ),
        )


class ReframeRequest(CamelModel):
    """Thought reframe request body."""

    situation: str = Field(..., min_length=1, max_length=2000)
    automatic_thought: str = Field(..., min_length=1, max_length=2000, alias="automaticThought")
    emotion: str = Field(..., min_length=1, max_length=100)

    def to_input(self) -> ReframeInput:
        return ReframeInput(
            situation=self.situation,
            automatic_thought=self.automatic_thought,
            emotion=self.emotion,
        )
