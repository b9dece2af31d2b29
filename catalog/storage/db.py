import asyncio
from typing import Any, AsyncIterator

from sqlalchemy import event
from sqlalchemy.engine.url import make_url
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.settings import app_settings


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str) -> AsyncEngine:
    """
    Create the async engine for `url`.

    SQLite engines get foreign key enforcement switched on for every
    connection and share a single connection for in-memory databases.
    Other backends use the pool settings from app_settings.

    Args:
        url: SQLAlchemy database URL.

    Returns:
        AsyncEngine: Configured engine.
    """
    if make_url(url).get_backend_name() == "sqlite":
        kwargs: dict[str, Any] = {}
        if ":memory:" in url:
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_async_engine(url, echo=False, **kwargs)
        event.listen(
            sqlite_engine.sync_engine, "connect", _enable_sqlite_foreign_keys
        )
        return sqlite_engine

    return create_async_engine(
        url,
        echo=False,
        pool_size=app_settings.DB_POOL_SIZE,
        max_overflow=app_settings.DB_MAX_OVERFLOW,
        pool_recycle=app_settings.DB_POOL_RECYCLE,
        pool_pre_ping=app_settings.DB_POOL_PRE_PING,
    )


def build_session_factory(bind: AsyncEngine) -> sessionmaker:
    return sessionmaker(bind, expire_on_commit=False, class_=AsyncSession)


engine: AsyncEngine = build_engine(app_settings.DATABASE_URL)
async_session = build_session_factory(engine)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
) -> None:
    """
    Wait until the database is available.

    Database schema is managed by Alembic migrations unless
    DB_CREATE_TABLES is enabled, in which case missing tables are created.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES
    for attempt in range(max_retries):
        try:
            async with engine.connect() as conn:
                await conn.exec_driver_sql("SELECT 1")
            logger.info("Database is now ready.")
            break
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)
    else:
        logger.error("Failed to connect to the database after multiple attempts.")
        raise RuntimeError("Database connection could not be established.")

    if app_settings.DB_CREATE_TABLES:
        await create_tables(engine)
        logger.info("Created database tables")


async def create_tables(bind: AsyncEngine) -> None:
    """Create all tables registered on SQLModel.metadata."""
    import catalog.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    Get an asynchronous session from the SQLAlchemy session factory.

    The session is committed when the request handler succeeds and rolled
    back when a database error escapes it.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise
