"""Shared pytest fixtures for all test suites."""

import os
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.app.config import Settings
from backend.app.db.engine import create_async_engine_from_settings, enable_sqlite_foreign_keys
from backend.app.db.models import Base


@pytest_asyncio.fixture
async def sqlite_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with foreign keys enforced and all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def sqlite_session(sqlite_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Async session on the in-memory SQLite engine."""
    async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
        yield session


@pytest_asyncio.fixture
async def postgres_engine() -> AsyncGenerator[AsyncEngine, None]:
    """PostgreSQL engine with the chat schema created; skips unless DATABASE_URL is PostgreSQL."""
    database_url = os.getenv("DATABASE_URL", "")
    if not database_url.startswith(("postgresql://", "postgresql+asyncpg://")):
        pytest.skip("DATABASE_URL is not a PostgreSQL URL")

    engine = create_async_engine_from_settings(Settings(database_url=database_url))
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def postgres_session(postgres_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Session on the PostgreSQL engine, rolled back after the test."""
    async with AsyncSession(postgres_engine, expire_on_commit=False) as session:
        yield session
        await session.rollback()
