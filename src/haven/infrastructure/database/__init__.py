"""
Database infrastructure components.
"""

from haven.infrastructure.database.connection import (
    Base,
    DatabaseManager,
    get_async_session,
    get_db_manager,
    reset_db_manager,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_async_session",
    "get_db_manager",
    "reset_db_manager",
]
