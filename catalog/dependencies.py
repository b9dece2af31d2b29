"""
Dependency injection configuration for FastAPI.

Services receive their repositories through constructor parameters; this
module wires them per request on top of the request-scoped session.
Override get_session in tests with app.dependency_overrides.

Example:
    ```python
    from fastapi import APIRouter
    from catalog.dependencies import AuthorServiceDep

    router = APIRouter()

    @router.get("/authors/{author_id}")
    async def get_author(author_id: str, service: AuthorServiceDep):
        return await service.find_one(author_id)
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.services.author_service import AuthorService
from catalog.services.book_service import BookService
from catalog.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

SessionDep = Annotated[AsyncSession, Depends(get_session)]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get author repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        AuthorRepository instance with session.
    """
    return AuthorRepository(session)


def get_book_repository(session: SessionDep) -> BookRepository:
    """
    Get book repository with injected database session.

    Args:
        session: Database session injected by FastAPI.

    Returns:
        BookRepository instance with session.
    """
    return BookRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]


# ============================================================================
# Service Dependencies
# ============================================================================


def get_author_service(repo: AuthorRepoDep) -> AuthorService:
    return AuthorService(repo)


def get_book_service(
    repo: BookRepoDep, author_repo: AuthorRepoDep
) -> BookService:
    return BookService(repo, author_repo)


AuthorServiceDep = Annotated[AuthorService, Depends(get_author_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
