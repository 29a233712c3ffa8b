"""Database engine and session factory creation."""

import os
from pathlib import Path
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from mvcmovie.config import DatabaseConfig
from mvcmovie.infrastructure.persistence.tables import metadata

_MEMORY_PATHS = ("", ":memory:")


def expand_sqlite_path(url: str) -> str:
    """Expand ~ in SQLite URLs and ensure parent directory exists.

    In-memory URLs (sqlite+aiosqlite:// or .../:memory:) are returned unchanged.
    """
    if not url.startswith("sqlite") or "///" not in url:
        return url

    # Extract path from URL (sqlite+aiosqlite:///path or sqlite:///path)
    prefix_end = url.index("///") + 3
    prefix = url[:prefix_end]
    path = url[prefix_end:]
    if path in _MEMORY_PATHS:
        return url

    abs_path = os.path.abspath(os.path.expanduser(path))
    Path(abs_path).parent.mkdir(parents=True, exist_ok=True)

    return f"{prefix}{abs_path}"


def is_memory_url(url: str) -> bool:
    """True for SQLite URLs that name an in-memory database."""
    if not url.startswith("sqlite"):
        return False
    if "///" not in url:
        return True
    return url[url.index("///") + 3 :] in _MEMORY_PATHS


def _own_sqlite_transactions(engine: AsyncEngine, wal: bool) -> None:
    """Emit BEGIN from SQLAlchemy instead of leaving it to the sqlite3 driver.

    The driver defers BEGIN until the first write, so consecutive reads in one
    session would otherwise each see the latest commit. With WAL, a reader keeps
    its snapshot while another connection commits.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection: Any, connection_record: Any) -> None:
        dbapi_connection.isolation_level = None
        if wal:
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")


def create_db_engine(config: DatabaseConfig) -> AsyncEngine:
    """Create async database engine.

    Handles SQLite and PostgreSQL with appropriate settings.
    """
    url = expand_sqlite_path(config.url)

    if url.startswith("sqlite"):
        memory = is_memory_url(url)
        engine_kwargs: dict[str, Any] = {
            "echo": config.echo,
            "connect_args": {"check_same_thread": False},
        }
        if memory:
            # One shared connection keeps the in-memory database alive
            engine_kwargs["poolclass"] = StaticPool
        engine = create_async_engine(url, **engine_kwargs)
        _own_sqlite_transactions(engine, wal=not memory)
        return engine

    return create_async_engine(
        url,
        echo=config.echo,
        pool_pre_ping=True,
        pool_size=5,
        max_overflow=10,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory for dependency injection."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create any missing tables. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
