"""
Database connection and session management for the keyword store.

Async engine and session factory are created lazily, once per process.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = structlog.get_logger(__name__)

# Global singletons
_engine: AsyncEngine | None = None
_SessionFactory: async_sessionmaker | None = None


def get_engine() -> AsyncEngine:
    """
    Get or create the async SQLAlchemy engine (singleton).

    Returns:
        AsyncEngine instance
    """
    global _engine

    if _engine is None:
        from court_sentiment.config import settings

        engine_kwargs = {
            "echo": settings.keywords_db_echo_sql,
            "pool_pre_ping": True,  # Verify connections before using
        }
        if not settings.keywords_db_url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.keywords_db_pool_size

        _engine = create_async_engine(settings.keywords_db_url, **engine_kwargs)

        logger.info(
            "keywords_db_engine_created",
            database=_engine.url.database,
            pool_size=engine_kwargs.get("pool_size"),
        )

    return _engine


def get_session_factory() -> async_sessionmaker:
    """
    Get or create the async session factory (singleton).

    Returns:
        async_sessionmaker bound to the engine
    """
    global _SessionFactory

    if _SessionFactory is None:
        _SessionFactory = async_sessionmaker(
            get_engine(), class_=AsyncSession, expire_on_commit=False
        )
        logger.info("keywords_db_session_factory_created")

    return _SessionFactory


@asynccontextmanager
async def get_db_session(
    session_factory: async_sessionmaker | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Async context manager for database sessions with automatic commit/rollback.

    Usage:
        >>> async with get_db_session() as session:
        ...     session.add(SentimentKeywordRow(...))
        ...     # Commits on success, rolls back on exception

    Args:
        session_factory: Factory to use instead of the global one

    Yields:
        AsyncSession instance

    Raises:
        Exception: Any database exception (after rollback)
    """
    factory = session_factory or get_session_factory()
    session = factory()

    try:
        yield session
        await session.commit()
        logger.debug("keywords_db_session_committed")
    except Exception as e:
        await session.rollback()
        logger.error("keywords_db_session_rollback", error=str(e), error_type=type(e).__name__)
        raise
    finally:
        await session.close()


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create the sentiment tables.

    For production, prefer a proper migration tool.
    """
    from .models import Base

    async with (engine or get_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("keywords_db_tables_created")


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop the sentiment tables.

    WARNING: Destructive operation. Only use for testing.
    """
    from .models import Base

    async with (engine or get_engine()).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.warning("keywords_db_tables_dropped")


async def dispose_engine() -> None:
    """Close pooled connections and reset the singletons."""
    global _engine, _SessionFactory

    if _engine is not None:
        await _engine.dispose()
        logger.info("keywords_db_engine_disposed")

    _engine = None
    _SessionFactory = None
