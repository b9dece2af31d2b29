# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from catalog.logging import logger
from catalog.middlewares.correlation_id import CorrelationIDMiddleware
from catalog.middlewares.logging_context import LoggingContextMiddleware
from catalog.middlewares.prometheus import PrometheusMiddleware
from catalog.middlewares.security_headers import SecurityHeadersMiddleware
from catalog.routing import collect_subrouters
from catalog.settings import app_settings
from catalog.storage.db import engine, wait_and_init_db
from catalog.utils.error_handler import register_exception_handlers

__version__ = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown.

    Startup waits for the database (and creates tables when
    DB_CREATE_TABLES is set); shutdown disposes the engine's pool.
    """
    logger.info("Application startup initiated")
    await wait_and_init_db()
    try:
        yield
    finally:
        logger.info("Application shutdown initiated")
        await engine.dispose()
        logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    The function includes the routers collected by
    `catalog.routing.collect_subrouters()`, installs the exception handlers
    from `catalog.utils.error_handler` and adds the following middleware:
    - `PrometheusMiddleware`: request count, duration and in-progress metrics.
    - `GZipMiddleware`: compresses responses above GZIP_MINIMUM_SIZE bytes.
    - `CORSMiddleware`: reflects allowed origins with credentials.
    - `SecurityHeadersMiddleware`: hardening headers on every response.
    - `LoggingContextMiddleware`: request log context and access log.
    - `CorrelationIDMiddleware`: X-Correlation-ID propagation.
    """
    app = FastAPI(
        title="Library Catalog",
        description="CRUD API for authors and books",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())
    register_exception_handlers(app)

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → LoggingContextMiddleware → SecurityHeadersMiddleware → CORSMiddleware → GZipMiddleware → PrometheusMiddleware
    app.add_middleware(PrometheusMiddleware)
    app.add_middleware(
        GZipMiddleware, minimum_size=app_settings.GZIP_MINIMUM_SIZE
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.ALLOWED_ORIGINS,
        allow_origin_regex=app_settings.ALLOWED_ORIGIN_REGEX,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app


app = application()  # Need for fastapi cli
