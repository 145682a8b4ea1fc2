"""
Episode Repository

Data access for recorded episodes. Converts between ORM rows and the
immutable Episode records used by the services.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from haven.config.logging_config import get_logger
from haven.domain.models.episode import Episode
from haven.domain.models.insight import WeeklyStats
from haven.infrastructure.database.models.episode_model import EpisodeModel
from haven.infrastructure.database.repositories.base import BaseRepository
from haven.services.insights.weekly_stats import compute_weekly_stats

logger = get_logger(__name__)


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo; stored values are UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_episode(row: EpisodeModel) -> Episode:
    return Episode(
        id=row.id,
        timestamp=as_utc(row.timestamp),
        intensity=row.intensity,
        duration_minutes=row.duration_minutes,
        triggers=tuple(row.triggers or ()),
        symptoms=tuple(row.symptoms or ()),
        tools_used=tuple(row.tools_used or ()),
        helpful_rating=row.helpful_rating,
        notes=row.notes,
        completed_flow=row.completed_flow,
    )


class EpisodeRepository(BaseRepository[EpisodeModel]):
    """
    Episode persistence.

    Usage:
        async with db.session() as session:
            repo = EpisodeRepository(session)
            await repo.log_episode(episode)
    """

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(EpisodeModel, session)

    async def log_episode(self, episode: Episode) -> Episode:
        """
        Persist one episode.

        Returns:
            The stored episode as read back from the database
        """
        row = await self.create(
            EpisodeModel(
                id=episode.id,
                timestamp=as_utc(episode.timestamp),
                intensity=episode.intensity,
                duration_minutes=episode.duration_minutes,
                triggers=list(episode.triggers),
                symptoms=list(episode.symptoms),
                tools_used=list(episode.tools_used),
                helpful_rating=episode.helpful_rating,
                notes=episode.notes,
                completed_flow=episode.completed_flow,
            )
        )

        logger.info(
            "Episode logged",
            episode_id=str(row.id),
            intensity=row.intensity,
            tool_count=len(episode.tools_used),
        )
        return to_episode(row)

    async def get_episode(self, episode_id: UUID) -> Optional[Episode]:
        row = await self.get_by_id(episode_id)
        return to_episode(row) if row is not None else None

    async def get_recent_episodes(
        self,
        days: int = 7,
        *,
        now: Optional[datetime] = None,
    ) -> list[Episode]:
        """
        Episodes from the trailing window, newest first.

        Args:
            days: Window length
            now: End of the window (defaults to the current time)
        """
        cutoff = as_utc(now or datetime.now(timezone.utc)) - timedelta(days=days)
        rows: Sequence[EpisodeModel] = await self._scalars(
            select(EpisodeModel)
            .where(EpisodeModel.timestamp >= cutoff)
            .order_by(EpisodeModel.timestamp.desc())
        )
        return [to_episode(row) for row in rows]

    async def get_weekly_stats(
        self,
        *,
        tz: Optional[tzinfo] = None,
        now: Optional[datetime] = None,
    ) -> Optional[WeeklyStats]:
        """
        Aggregate the last seven days.

        Returns:
            WeeklyStats, or None when no episodes were recorded
        """
        episodes = await self.get_recent_episodes(7, now=now)
        return compute_weekly_stats(episodes, tz=tz)
