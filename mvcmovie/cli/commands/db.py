"""Database maintenance commands."""

import asyncio
import sys

import cyclopts
from sqlalchemy.exc import SQLAlchemyError

from mvcmovie.cli.console import get_console
from mvcmovie.config import Config, configure_logging
from mvcmovie.infrastructure.persistence.database import create_db_engine, create_schema
from mvcmovie.infrastructure.persistence.migrate import run_migrations
from mvcmovie.infrastructure.persistence.seed import seed_movies

app = cyclopts.App(name="db", help="Database management commands")


@app.command
def migrate(revision: str = "head") -> None:
    """Apply Alembic migrations.

    Args:
        revision: Target revision.
    """
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)

    try:
        run_migrations(config.database.url, revision)
    except SQLAlchemyError as e:
        console.error(f"Migration failed: {e}")
        sys.exit(1)
    console.success(f"Database at revision {revision}")


@app.command
def seed() -> None:
    """Insert the sample movies into an empty catalog."""
    console = get_console()
    config = Config()  # type: ignore[call-arg]
    configure_logging(config.logging)

    async def _seed() -> int:
        engine = create_db_engine(config.database)
        try:
            if config.database.auto_migrate:
                await create_schema(engine)
            return await seed_movies(engine)
        finally:
            await engine.dispose()

    try:
        inserted = asyncio.run(_seed())
    except SQLAlchemyError as e:
        console.error(f"Seeding failed: {e}", hint="Run 'mvcmovie db migrate' first")
        sys.exit(1)

    if inserted:
        console.success(f"Inserted {inserted} sample movies")
    else:
        console.print("Catalog already has movies, nothing inserted")
