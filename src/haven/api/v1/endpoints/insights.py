"""
Insight Endpoints

Weekly insight for the progress screen.
"""

from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends

from haven.api.dependencies import get_episode_repository, get_insight_generator, get_timezone
from haven.infrastructure.database.repositories import EpisodeRepository
from haven.services.insights import WeeklyInsightGenerator

router = APIRouter()


@router.get("/weekly", summary="Weekly insight and the stats behind it")
async def weekly_insight(
    episodes: EpisodeRepository = Depends(get_episode_repository),
    generator: WeeklyInsightGenerator = Depends(get_insight_generator),
    tz: ZoneInfo = Depends(get_timezone),
) -> dict:
    """
    Aggregate the last seven days and describe them.

    A week without episodes is answered locally.
    """
    stats = await episodes.get_weekly_stats(tz=tz)
    insight = await generator.generate(stats)

    body = insight.to_dict()
    body["stats"] = stats.to_dict() if stats is not None else None
    return body
