"""
Safety Event Repository

Append-only log of safety events for the user's own records.
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from haven.config.logging_config import get_logger
from haven.domain.enums.triage import SafetyEventType
from haven.domain.models.episode import SafetyEvent
from haven.infrastructure.database.models.safety_event_model import SafetyEventModel
from haven.infrastructure.database.repositories.base import BaseRepository
from haven.infrastructure.database.repositories.episode_repository import as_utc
from haven.infrastructure.metrics import SAFETY_EVENTS_TOTAL

logger = get_logger(__name__)


def to_safety_event(row: SafetyEventModel) -> SafetyEvent:
    return SafetyEvent(
        id=row.id,
        timestamp=as_utc(row.timestamp),
        event_type=SafetyEventType(row.event_type),
        action_taken=row.action_taken,
    )


class SafetyEventRepository(BaseRepository[SafetyEventModel]):
    """Safety event persistence."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(SafetyEventModel, session)

    async def log_safety_event(
        self,
        event_type: SafetyEventType,
        action_taken: str,
    ) -> SafetyEvent:
        """
        Record a safety event.

        Args:
            event_type: What happened
            action_taken: What the app did about it
        """
        row = await self.create(
            SafetyEventModel(event_type=event_type.value, action_taken=action_taken)
        )
        SAFETY_EVENTS_TOTAL.labels(event_type=event_type.value).inc()
        logger.info("Safety event logged", event_type=event_type.value)
        return to_safety_event(row)

    async def list_safety_events(self, limit: int = 50) -> list[SafetyEvent]:
        """Most recent safety events first."""
        rows: Sequence[SafetyEventModel] = await self._scalars(
            select(SafetyEventModel)
            .order_by(SafetyEventModel.timestamp.desc())
            .limit(limit)
        )
        return [to_safety_event(row) for row in rows]
