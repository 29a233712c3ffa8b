import logging
from contextlib import asynccontextmanager

import logfire
from dishka import Provider
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from mvcmovie.application.api.v1.errors import map_error
from mvcmovie.application.api.v1.routes import health, movies
from mvcmovie.application.di import create_container
from mvcmovie.config import Config, configure_logging
from mvcmovie.domain.shared.error import MvcMovieError
from mvcmovie.infrastructure.persistence.database import create_schema
from mvcmovie.infrastructure.persistence.seed import seed_movies
from mvcmovie.util.di.fastapi import setup_dishka

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.dishka_container
    config = await container.get(Config)

    engine = await container.get(AsyncEngine)
    if config.database.auto_migrate:
        await create_schema(engine)
    if config.database.seed:
        await seed_movies(engine)

    yield

    await container.close()


def create_app(config: Config | None = None, *overrides: Provider) -> FastAPI:
    """Create FastAPI application."""
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    # Configure logging early
    configure_logging(config.logging)
    logger.info("Starting %s server v%s", config.server.name, config.server.version)

    app_instance = FastAPI(
        title=config.server.name,
        description=config.server.description,
        version=config.server.version,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    logfire.configure(send_to_logfire="if-token-present", console=False)
    logfire.instrument_httpx()
    logfire.instrument_fastapi(app_instance)

    # Setup dependency injection
    container = create_container(config, *overrides)
    setup_dishka(container, app_instance)

    app_instance.include_router(health.router, prefix="/api/v1")
    app_instance.include_router(movies.router, prefix="/api/v1")

    # Global error handler - maps domain and infrastructure errors to HTTP responses
    @app_instance.exception_handler(MvcMovieError)
    async def movie_error_handler(request: Request, exc: MvcMovieError):
        http_exc = map_error(exc)
        if http_exc.status_code >= 500:
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc)
        return JSONResponse(
            status_code=http_exc.status_code,
            content=http_exc.detail,
        )

    # Global exception handler - logs all unhandled exceptions
    @app_instance.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(
            "Unhandled exception on %s %s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app_instance
