"""
Repository for Book entity.

Every read returns books with their author already loaded, so callers can
serialize the relationship outside of the session's greenlet context.
"""

from sqlalchemy import or_
from sqlalchemy.orm import selectinload
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.book import Book
from catalog.repositories.base import BaseRepository
from catalog.storage.pagination import (
    LIKE_ESCAPE_CHAR,
    contains_pattern,
    paginate,
)


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_with_author(self, id: str) -> Book | None:
        """
        Get a book by ID with its author eagerly loaded.

        Already loaded instances are refreshed from the database, so the
        result reflects writes flushed earlier in the same session.

        Args:
            id: Book ID.

        Returns:
            Book if found, None otherwise.
        """
        stmt = (
            select(Book)
            .where(Book.id == id)
            .options(selectinload(Book.author))  # type: ignore[arg-type]
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def find_page(
        self,
        page: int,
        limit: int,
        search: str | None = None,
        author_id: str | None = None,
    ) -> list[Book]:
        """
        Get one page of books with authors loaded.

        Args:
            page: Page number (starts at 1).
            limit: Maximum number of books to return.
            search: Case-insensitive substring matched against title or ISBN.
            author_id: Only return books by this author.

        Returns:
            Books ordered by creation time.
        """
        stmt = select(Book).options(selectinload(Book.author))  # type: ignore[arg-type]
        if author_id:
            stmt = stmt.where(Book.author_id == author_id)
        if search:
            pattern = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    col(Book.title).ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                    col(Book.isbn).ilike(pattern, escape=LIKE_ESCAPE_CHAR),
                )
            )
        stmt = stmt.order_by(col(Book.created_at), col(Book.id))
        result = await self.session.exec(paginate(stmt, page, limit))
        return list(result.all())
