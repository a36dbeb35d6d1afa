"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- In-memory keyword store with a read counter
- Manual clock for cache expiry
- SQLite-backed async session factory for store tests
- Mock settings/configuration
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
import structlog
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from court_sentiment.config import Settings
from court_sentiment.keywords.accessor import KeywordAccessor
from court_sentiment.keywords.cache import KeywordCache
from court_sentiment.keywords.database import create_all_tables
from court_sentiment.keywords.store import SqlKeywordStore
from .fixtures.keywords import SAMPLE_REVIEWS, FakeKeywordStore, ManualClock


@pytest.fixture(autouse=True)
def silent_structlog():
    """
    Route structlog output nowhere for the duration of a test.

    Loggers are not cached, so every call picks up this configuration.
    """
    structlog.configure(
        processors=[structlog.processors.add_log_level],
        logger_factory=structlog.ReturnLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        keywords_db_url="sqlite+aiosqlite://",
        keyword_cache_ttl_seconds=300,
        llm_api_key="",
        log_level="INFO",
        log_json=False,  # Easier to read in tests
    )


@pytest.fixture
def sample_reviews() -> dict:
    return SAMPLE_REVIEWS


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def fake_store() -> FakeKeywordStore:
    """
    In-memory store with a small Vietnamese lexicon.

    Returns:
        FakeKeywordStore with three active keywords and one inactive one
    """
    store = FakeKeywordStore()
    store.add("tốt", "positive", 1.0)
    store.add("sạch sẽ", "positive", 1.2)
    store.add("tệ", "negative", 1.0)
    store.add("ổn", "positive", 0.8, active=False)
    return store


@pytest.fixture
def accessor(fake_store: FakeKeywordStore, clock: ManualClock) -> KeywordAccessor:
    """Accessor over the fake store with a 300s TTL and a manual clock."""
    return KeywordAccessor(store=fake_store, cache=KeywordCache(ttl_seconds=300), clock=clock)


# ============================================================================
# SQL STORE
# ============================================================================

@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Fresh in-memory SQLite database with the sentiment tables.

    Yields:
        AsyncEngine sharing a single connection
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(sqlite_engine, expire_on_commit=False)


@pytest.fixture
def sql_store(session_factory: async_sessionmaker) -> SqlKeywordStore:
    return SqlKeywordStore(session_factory)


@pytest.fixture
def sql_accessor(sql_store: SqlKeywordStore, clock: ManualClock) -> KeywordAccessor:
    return KeywordAccessor(store=sql_store, cache=KeywordCache(ttl_seconds=300), clock=clock)
