import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool

from ..infrastructure.repositories import SqlAlchemyMessageRepository
from ..models.base import Base
from ..services.message_store import MessageStore
from .config import Settings

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(database_url)
    if not url.drivername.startswith("sqlite"):
        return
    if not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


class Database:
    """Owns one async engine and its session factory."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None
        self._init_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    @property
    def engine(self) -> Optional[AsyncEngine]:
        return self._engine

    async def init(self) -> None:
        """Initialize database connection and create tables"""
        # Concurrent first sessions must not see the factory before create_all
        async with self._init_lock:
            if self._session_factory is not None:
                return

            logger.info(f"Initializing database: {self.database_url}")
            _ensure_sqlite_directory(self.database_url)

            engine_kwargs = {"echo": self.echo}
            if ":memory:" in self.database_url:
                # In-memory SQLite lives and dies with a single connection
                engine_kwargs["poolclass"] = StaticPool
            elif "sqlite" in self.database_url:
                engine_kwargs["poolclass"] = NullPool
            else:
                engine_kwargs["pool_pre_ping"] = True

            engine = create_async_engine(self.database_url, **engine_kwargs)
            try:
                async with engine.begin() as conn:
                    await conn.run_sync(Base.metadata.create_all)
            except Exception:
                await engine.dispose()
                raise
            logger.info("Database tables created/verified")

            self._engine = engine
            self._session_factory = async_sessionmaker(
                engine, class_=AsyncSession, expire_on_commit=False
            )

    async def close(self) -> None:
        """Close database connection"""
        if self._engine is not None:
            await self._engine.dispose()
            logger.info("Database connection closed")
        self._engine = None
        self._session_factory = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get database session context manager"""
        if self._session_factory is None:
            await self.init()

        async with self._session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logger.error(f"Database session error: {e}")
                raise

    @asynccontextmanager
    async def message_store(self) -> AsyncGenerator[MessageStore, None]:
        """MessageStore bound to a fresh session for one unit of work."""
        async with self.session() as session:
            yield MessageStore(SqlAlchemyMessageRepository(session))

    async def health_check(self) -> bool:
        """Check if database is accessible"""
        try:
            async with self.session() as session:
                result = await session.execute(text("SELECT 1"))
                value = result.scalar()
        except Exception as e:
            logger.error(f"Database health check failed: {e}", exc_info=True)
            return False

        if value != 1:
            logger.warning(f"Database health check query returned unexpected value: {value}")
            return False
        logger.debug("Database health check successful")
        return True
