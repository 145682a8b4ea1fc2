"""
Episode Endpoints

Record episodes, read back the recent ones, and the weekly stats and
safety event log derived from them.
"""

from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query, status
from pydantic import AwareDatetime, Field

from haven.api.dependencies import (
    get_episode_repository,
    get_safety_event_repository,
    get_timezone,
)
from haven.api.schemas import CamelModel
from haven.domain.enums.triage import SuggestedFlow
from haven.domain.models.episode import Episode
from haven.infrastructure.database.repositories import (
    EpisodeRepository,
    SafetyEventRepository,
)

router = APIRouter()


class EpisodeCreateRequest(CamelModel):
    """New episode body."""

    intensity: int = Field(..., ge=0, le=10)
    timestamp: Optional[AwareDatetime] = Field(
        default=None,
        description="Episode start; defaults to now",
    )
    duration_minutes: Optional[int] = Field(default=None, ge=0, alias="durationMinutes")
    triggers: list[str] = Field(default_factory=list)
    symptoms: list[str] = Field(default_factory=list)
    tools_used: list[str] = Field(default_factory=list, alias="toolsUsed")
    helpful_rating: Optional[int] = Field(default=None, ge=1, le=5, alias="helpfulRating")
    notes: Optional[str] = Field(default=None, max_length=4000)
    completed_flow: Optional[SuggestedFlow] = Field(default=None, alias="completedFlow")

    def to_episode(self) -> Episode:
        fields = {}
        if self.timestamp is not None:
            fields["timestamp"] = self.timestamp
        return Episode(
            intensity=self.intensity,
            duration_minutes=self.duration_minutes,
            triggers=tuple(self.triggers),
            symptoms=tuple(self.symptoms),
            tools_used=tuple(self.tools_used),
            helpful_rating=self.helpful_rating,
            notes=self.notes,
            completed_flow=self.completed_flow.value if self.completed_flow else None,
            **fields,
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Record an episode",
)
async def log_episode(
    request: EpisodeCreateRequest,
    episodes: EpisodeRepository = Depends(get_episode_repository),
) -> dict:
    episode = await episodes.log_episode(request.to_episode())
    return episode.to_dict()


@router.get("", summary="Recent episodes, newest first")
async def list_recent_episodes(
    days: int = Query(default=7, ge=1, le=365),
    episodes: EpisodeRepository = Depends(get_episode_repository),
) -> list[dict]:
    return [episode.to_dict() for episode in await episodes.get_recent_episodes(days)]


@router.get("/stats", summary="Statistics for the last seven days")
async def weekly_stats(
    episodes: EpisodeRepository = Depends(get_episode_repository),
    tz: ZoneInfo = Depends(get_timezone),
) -> Optional[dict]:
    """Returns null when no episodes were recorded this week."""
    stats = await episodes.get_weekly_stats(tz=tz)
    return stats.to_dict() if stats is not None else None


@router.get("/safety-events", summary="Safety event log, newest first")
async def list_safety_events(
    limit: int = Query(default=50, ge=1, le=500),
    safety_events: SafetyEventRepository = Depends(get_safety_event_repository),
) -> list[dict]:
    return [event.to_dict() for event in await safety_events.list_safety_events(limit)]
