"""
Database Connection Management

Async SQLAlchemy engine for the local episode store, with:
- SQLite via aiosqlite (file or in-memory)
- Table creation on startup
- Health checks
- Graceful shutdown
- Transaction management

PRIVACY: The store lives on the user's own deployment. Episode notes
are free text and must never be logged.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from haven.config import get_settings
from haven.config.logging_config import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for all ORM models.

    All database models should inherit from this base.
    """
    pass


def _is_memory_url(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


class DatabaseManager:
    """
    Manages the engine and sessions for the episode store.

    Usage:
        db = DatabaseManager()
        await db.initialize()
        async with db.session() as session:
            # use session
        await db.close()
    """

    def __init__(self, url: Optional[str] = None, echo: Optional[bool] = None) -> None:
        """
        Args:
            url: SQLAlchemy async URL (defaults to HAVEN_DB_URL)
            echo: Log SQL statements (defaults to HAVEN_DB_ECHO)
        """
        settings = get_settings()
        self._url = url or settings.database.url
        self._echo = settings.database.echo if echo is None else echo
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._initialized = False

    async def initialize(self) -> None:
        """
        Create the engine, session factory and tables.

        Should be called once during application startup.
        """
        if self._initialized:
            logger.warning("Database already initialized")
            return

        if _is_memory_url(self._url):
            # One shared connection, otherwise every session sees an empty database
            self._engine = create_async_engine(
                self._url,
                echo=self._echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            self._engine = create_async_engine(self._url, echo=self._echo)

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

        # Registers the tables on Base.metadata
        from haven.infrastructure.database import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        self._initialized = True
        logger.info("Episode store initialized", in_memory=_is_memory_url(self._url))

    async def close(self) -> None:
        """
        Close database connections.

        Should be called during application shutdown.
        """
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            self._initialized = False
            logger.info("Database connections closed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get a database session with automatic commit or rollback.

        Yields:
            AsyncSession: Database session
        """
        if not self._session_factory:
            raise RuntimeError("Database not initialized. Call initialize() first.")

        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """
        Check database connectivity.

        Returns:
            True if database is reachable, False otherwise
        """
        if not self._engine:
            return False

        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error("Database health check failed", error=str(e))
            return False

    @property
    def engine(self) -> AsyncEngine | None:
        return self._engine

    @property
    def is_initialized(self) -> bool:
        return self._initialized


_db_manager: DatabaseManager | None = None


def get_db_manager() -> DatabaseManager:
    """
    Get the global database manager instance.

    Returns:
        DatabaseManager: Singleton database manager
    """
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager


def reset_db_manager() -> None:
    """Forget the global manager (for testing)."""
    global _db_manager
    _db_manager = None


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for getting a database session.

    Usage in endpoint:
        @router.get("/episodes")
        async def list_episodes(session: AsyncSession = Depends(get_async_session)):
            ...

    Yields:
        AsyncSession: Database session
    """
    db = get_db_manager()
    async with db.session() as session:
        yield session
