"""
Business operations for authors.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.services.author_service import AuthorService

    async with async_session() as session:
        service = AuthorService(AuthorRepository(session))
        author = await service.create(
            CreateAuthorInput(firstName="Jane", lastName="Austen")
        )
        await session.commit()
    ```
"""

from sqlalchemy.exc import NoResultFound

from catalog.exceptions import NotFoundError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.repositories.author_repository import AuthorRepository
from catalog.schemas.author import CreateAuthorInput, UpdateAuthorInput
from catalog.utils.metrics import entities_created_total, store_errors_total


def author_not_found(author_id: str) -> NotFoundError:
    return NotFoundError(f'Author with ID "{author_id}" not found')


class AuthorService:
    """
    Author use cases on top of an AuthorRepository.

    Store-level "no row matched" conditions become NotFoundError; every
    other database error propagates unchanged.
    """

    def __init__(self, repository: AuthorRepository):
        """
        Initialize service with repository.

        Args:
            repository: Author repository for data access.
        """
        self.repository = repository

    async def create(self, input_data: CreateAuthorInput) -> Author:
        """
        Create a new author.

        Args:
            input_data: Validated author fields. birthDate is already parsed
                into a date by the schema.

        Returns:
            Created author with server-assigned id and timestamps.
        """
        author = Author(**input_data.model_dump(exclude_unset=True))
        created = await self.repository.create(author)
        entities_created_total.labels(entity="author").inc()
        logger.info(f"Created author {created.id}")
        return created

    async def find_all(
        self, page: int = 1, limit: int = 10, search: str | None = None
    ) -> list[Author]:
        """
        List authors page by page.

        Args:
            page: Page number (starts at 1).
            limit: Page size.
            search: Optional case-insensitive substring of first or last name.

        Returns:
            Up to `limit` authors starting at offset (page - 1) * limit.
        """
        return await self.repository.find_page(page, limit, search)

    async def find_one(self, author_id: str) -> Author:
        """
        Get an author by ID.

        Raises:
            NotFoundError: If no author has this ID.
        """
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise author_not_found(author_id)
        return author

    async def update(
        self, author_id: str, input_data: UpdateAuthorInput
    ) -> Author:
        """
        Apply a partial update to an author.

        Args:
            author_id: ID of the author to update.
            input_data: Fields to change; unset fields are left as they are.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If no author has this ID.
        """
        try:
            return await self.repository.update(
                author_id, input_data.model_dump(exclude_unset=True)
            )
        except NoResultFound:
            store_errors_total.labels(kind="not_found").inc()
            raise author_not_found(author_id) from None

    async def remove(self, author_id: str) -> None:
        """
        Delete an author.

        Authors that still have books are not guarded against: the book
        foreign key rejects the delete and the IntegrityError propagates.

        Raises:
            NotFoundError: If no author has this ID.
            IntegrityError: If the author still has books.
        """
        author = await self.find_one(author_id)
        await self.repository.delete(author)
        logger.info(f"Deleted author {author_id}")
