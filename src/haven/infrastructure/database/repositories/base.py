"""
Base Repository Pattern

Generic async operations shared by the episode store repositories.
Keeps data access separate from the domain records the services use.
"""

from typing import Generic, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from haven.infrastructure.database.connection import Base

# Type variable for model types
ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Generic base repository with async CRUD operations.

    Usage:
        class EpisodeRepository(BaseRepository[EpisodeModel]):
            pass

        repo = EpisodeRepository(EpisodeModel, session)
        row = await repo.get_by_id(episode_id)
    """

    def __init__(self, model: Type[ModelT], session: AsyncSession) -> None:
        """
        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self._model = model
        self._session = session

    async def get_by_id(self, id: UUID) -> Optional[ModelT]:
        result = await self._session.execute(
            select(self._model).where(self._model.id == id)
        )
        return result.scalar_one_or_none()

    async def create(self, entity: ModelT) -> ModelT:
        """
        Add an entity and flush so defaults are populated.

        Returns:
            The persisted entity
        """
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def rollback(self) -> None:
        """Discard a failed write so the session stays usable."""
        await self._session.rollback()

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(self._model)
        )
        return result.scalar_one()

    async def _scalars(self, query) -> Sequence[ModelT]:
        result = await self._session.execute(query)
        return result.scalars().all()
