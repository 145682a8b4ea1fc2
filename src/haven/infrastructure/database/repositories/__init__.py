"""
Repository pattern implementations package.
"""

from haven.infrastructure.database.repositories.base import BaseRepository
from haven.infrastructure.database.repositories.episode_repository import EpisodeRepository
from haven.infrastructure.database.repositories.safety_event_repository import (
    SafetyEventRepository,
)

__all__ = [
    "BaseRepository",
    "EpisodeRepository",
    "SafetyEventRepository",
]
