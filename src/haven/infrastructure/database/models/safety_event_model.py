"""
Safety Event Database Model

Minimal audit trail of safety-relevant moments. Only the event type
and the action taken are stored; the user's text and the keywords it
matched are never persisted.
"""

from datetime import datetime, timezone
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from haven.infrastructure.database.connection import Base


class SafetyEventModel(Base):
    """
    Safety event table ORM model.

    Table: safety_events
    """

    __tablename__ = "safety_events"

    id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid4,
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    event_type: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        index=True,
        doc="crisis_detected, medical_warning or crisis_screen_shown"
    )
    action_taken: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        doc="What the app did in response"
    )

    def __repr__(self) -> str:
        return f"<SafetyEvent(id={self.id}, type={self.event_type})>"
