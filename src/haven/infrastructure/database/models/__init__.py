"""
Database ORM models package.
"""

from haven.infrastructure.database.models.episode_model import EpisodeModel
from haven.infrastructure.database.models.safety_event_model import SafetyEventModel

__all__ = [
    "EpisodeModel",
    "SafetyEventModel",
]
