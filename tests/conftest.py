"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for the database (a fresh in-memory
SQLite database per test), the HTTP client and model factories.
"""

import os
import tempfile

# Set required environment variables for testing before importing app modules
os.environ.setdefault("DB_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault(
    "LOG_FILE_PATH",
    os.path.join(tempfile.gettempdir(), "catalog-tests", "errors.log"),
)

from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from catalog import application
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.storage.db import (
    build_engine,
    build_session_factory,
    create_tables,
)
from tests.mocks.sample_data import VALID_ISBN_13

TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def engine():
    """
    Provides an engine bound to a fresh in-memory database with all tables.

    Yields:
        AsyncEngine: Engine with foreign keys enforced.
    """
    test_engine = build_engine(TEST_DB_URL)
    await create_tables(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return build_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    """
    Provides a database session for repository tests.

    Yields:
        AsyncSession: Session on the per-test database.
    """
    async with session_factory() as db_session:
        yield db_session


@pytest_asyncio.fixture
async def client(session_factory, monkeypatch):
    """
    HTTP client for the full application with the session factory
    pointed at the per-test database.

    The lifespan is not run, so no connection to the configured database
    is attempted.

    Yields:
        AsyncClient: Client sending requests through ASGITransport.
    """
    monkeypatch.setattr("catalog.storage.db.async_session", session_factory)
    app = application()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


@pytest.fixture
def make_author():
    """
    Factory for unsaved Author instances.

    Returns:
        Callable accepting field overrides.
    """

    def _make(**overrides) -> Author:
        fields = {
            "first_name": "Jane",
            "last_name": "Austen",
            "bio": None,
            "birth_date": date(1775, 12, 16),
        }
        fields.update(overrides)
        return Author(**fields)

    return _make


@pytest.fixture
def make_book():
    """
    Factory for unsaved Book instances.

    Returns:
        Callable accepting field overrides; author_id is required.
    """

    def _make(author_id: str, **overrides) -> Book:
        fields = {
            "title": "Pride and Prejudice",
            "isbn": VALID_ISBN_13,
            "published_date": date(1813, 1, 28),
            "genre": "Novel",
            "author_id": author_id,
        }
        fields.update(overrides)
        return Book(**fields)

    return _make
