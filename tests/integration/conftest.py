"""Fixtures for in-memory SQLite integration tests."""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from mvcmovie.config import DatabaseConfig
from mvcmovie.infrastructure.persistence.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)


@pytest_asyncio.fixture
async def engine():
    """Per-test engine on a fresh in-memory database."""
    engine = create_db_engine(DatabaseConfig(url="sqlite+aiosqlite://"))
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine):
    factory = create_session_factory(engine)
    async with factory() as session:
        yield session
        await session.rollback()
