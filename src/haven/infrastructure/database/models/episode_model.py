"""
Episode Database Model

SQLAlchemy ORM model for recorded anxiety episodes.

PRIVACY: notes is free text written by the user. It is stored locally
and never logged.
"""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, DateTime, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from haven.infrastructure.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EpisodeModel(Base):
    """
    Episode table ORM model.

    Table: episodes
    """

    __tablename__ = "episodes"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
        doc="Unique episode identifier"
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        index=True,
        doc="Episode start, stored as UTC"
    )

    intensity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        doc="Peak distress (0-10)"
    )
    duration_minutes: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        doc="Episode length in minutes"
    )

    # Lists stored as JSON arrays
    triggers: Mapped[list] = mapped_column(
        JSON,
        default=list,
        doc="Situations associated with the episode"
    )
    symptoms: Mapped[list] = mapped_column(
        JSON,
        default=list,
        doc="Physical sensations reported"
    )
    tools_used: Mapped[list] = mapped_column(
        JSON,
        default=list,
        doc="Coping tools tried"
    )

    helpful_rating: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        doc="How helpful the tools were (1-5)"
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        doc="Free-text notes (never logged)"
    )
    completed_flow: Mapped[Optional[str]] = mapped_column(
        String(30),
        nullable=True,
        doc="Last exercise flow finished"
    )

    def __repr__(self) -> str:
        return f"<Episode(id={self.id}, intensity={self.intensity})>"
