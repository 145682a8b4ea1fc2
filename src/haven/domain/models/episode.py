"""
Episode Domain Models

Records kept in the local episode store: anxiety episodes and the
minimal safety-event audit trail.

PRIVACY: Safety events never carry the user's text or the keywords
it matched, only the kind of event and the action taken.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from haven.domain.enums.triage import SafetyEventType


@dataclass(frozen=True)
class Episode:
    """
    One recorded anxiety episode.

    Attributes:
        intensity: Peak self-reported distress, 0-10
        timestamp: When the episode started
        triggers: Situations associated with the episode
        symptoms: Physical sensations reported
        tools_used: Coping tools the user tried
        helpful_rating: How helpful the tools were, 1-5, if rated
        duration_minutes: How long the episode lasted, if known
        notes: Free-text notes
        completed_flow: Last exercise flow the user finished
        id: Episode identifier
    """

    intensity: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    triggers: tuple[str, ...] = ()
    symptoms: tuple[str, ...] = ()
    tools_used: tuple[str, ...] = ()
    helpful_rating: Optional[int] = None
    duration_minutes: Optional[int] = None
    notes: Optional[str] = None
    completed_flow: Optional[str] = None
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "timestamp": self.timestamp.isoformat(),
            "intensity": self.intensity,
            "durationMinutes": self.duration_minutes,
            "triggers": list(self.triggers),
            "symptoms": list(self.symptoms),
            "toolsUsed": list(self.tools_used),
            "helpfulRating": self.helpful_rating,
            "notes": self.notes,
            "completedFlow": self.completed_flow,
        }


@dataclass(frozen=True)
class SafetyEvent:
    """A safety-relevant moment, kept for the user's own audit trail."""

    event_type: SafetyEventType
    action_taken: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: UUID = field(default_factory=uuid4)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "timestamp": self.timestamp.isoformat(),
            "type": self.event_type.value,
            "actionTaken": self.action_taken,
        }
