"""
Repository for Author entity with specialized query methods.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        first_page = await repo.find_page(page=1, limit=10)
        matches = await repo.find_page(page=1, limit=10, search="austen")
    ```
"""

from sqlalchemy import or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.author import Author
from catalog.repositories.base import BaseRepository
from catalog.storage.pagination import (
    LIKE_ESCAPE_CHAR,
    contains_pattern,
    paginate,
)


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus
    paginated search.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Author repository.

        Args:
            session: Database session for executing queries.
        """
        super().__init__(session, Author)

    async def find_page(
        self, page: int, limit: int, search: str | None = None
    ) -> list[Author]:
        """
        Get one page of authors, optionally filtered by name.

        Args:
            page: Page number (starts at 1).
            limit: Maximum number of authors to return.
            search: Case-insensitive substring matched against first name
                or last name. Empty or None disables the filter.

        Returns:
            Authors ordered by creation time.
        """
        stmt = select(Author)
        if search:
            pattern = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    col(Author.first_name).ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                    col(Author.last_name).ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                )
            )
        stmt = stmt.order_by(col(Author.created_at), col(Author.id))
        result = await self.session.exec(paginate(stmt, page, limit))
        return list(result.all())
