"""
Business operations for books.

Besides plain CRUD, the service checks that the referenced author exists
before any write and turns ISBN unique-constraint violations into client
errors.
"""

from sqlalchemy.exc import IntegrityError, NoResultFound

from catalog.exceptions import BadRequestError, NotFoundError
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.protocols import Repository
from catalog.repositories.book_repository import BookRepository
from catalog.schemas.book import CreateBookInput, UpdateBookInput
from catalog.storage.errors import is_unique_violation
from catalog.utils.metrics import entities_created_total, store_errors_total


def book_not_found(book_id: str) -> NotFoundError:
    return NotFoundError(f'Book with ID "{book_id}" not found')


class BookService:
    """
    Book use cases on top of a BookRepository.

    Uses the Repository[Author] protocol for author lookups, as it only
    needs the standard exists() method.
    """

    def __init__(
        self,
        repository: BookRepository,
        author_repository: Repository[Author],
    ):
        """
        Initialize service with repositories.

        Args:
            repository: Book repository for data access.
            author_repository: Author repository used to validate authorId.
        """
        self.repository = repository
        self.author_repository = author_repository

    async def _ensure_author_exists(self, author_id: str) -> None:
        if not await self.author_repository.exists(id=author_id):
            raise BadRequestError(
                f'Author with ID "{author_id}" does not exist.',
                field="authorId",
            )

    def _translate_integrity_error(
        self, error: IntegrityError, isbn: str | None
    ) -> BadRequestError | None:
        if isbn is not None and is_unique_violation(error, "isbn"):
            store_errors_total.labels(kind="unique_violation").inc()
            return BadRequestError(
                f'Book with ISBN "{isbn}" already exists.', field="isbn"
            )
        return None

    async def _load(self, book_id: str) -> Book:
        book = await self.repository.get_with_author(book_id)
        if book is None:
            raise book_not_found(book_id)
        return book

    async def create(self, input_data: CreateBookInput) -> Book:
        """
        Create a new book for an existing author.

        Args:
            input_data: Validated book fields.

        Returns:
            Created book with its author loaded.

        Raises:
            BadRequestError: If the author does not exist or the ISBN is
                already taken.
        """
        await self._ensure_author_exists(input_data.author_id)

        book = Book(**input_data.model_dump(exclude_unset=True))
        try:
            created = await self.repository.create(book)
        except IntegrityError as ex:
            translated = self._translate_integrity_error(ex, input_data.isbn)
            if translated is None:
                raise
            raise translated from ex

        entities_created_total.labels(entity="book").inc()
        logger.info(f"Created book {created.id}")
        return await self._load(created.id)

    async def find_all(
        self,
        page: int = 1,
        limit: int = 10,
        search: str | None = None,
        author_id: str | None = None,
    ) -> list[Book]:
        """
        List books page by page, authors included.

        Args:
            page: Page number (starts at 1).
            limit: Page size.
            search: Optional case-insensitive substring of title or ISBN.
            author_id: Optional exact author filter.
        """
        return await self.repository.find_page(page, limit, search, author_id)

    async def find_one(self, book_id: str) -> Book:
        """
        Get a book by ID with its author.

        Raises:
            NotFoundError: If no book has this ID.
        """
        return await self._load(book_id)

    async def update(self, book_id: str, input_data: UpdateBookInput) -> Book:
        """
        Apply a partial update to a book.

        A new authorId is checked before anything is written, so a bad
        reference leaves the book unchanged.

        Args:
            book_id: ID of the book to update.
            input_data: Fields to change; unset fields are left as they are.

        Returns:
            Updated book with its (possibly new) author loaded.

        Raises:
            BadRequestError: If the new author does not exist or the new
                ISBN is already taken.
            NotFoundError: If no book has this ID.
        """
        values = input_data.model_dump(exclude_unset=True)
        if "author_id" in values:
            await self._ensure_author_exists(values["author_id"])

        try:
            await self.repository.update(book_id, values)
        except NoResultFound:
            store_errors_total.labels(kind="not_found").inc()
            raise book_not_found(book_id) from None
        except IntegrityError as ex:
            translated = self._translate_integrity_error(ex, values.get("isbn"))
            if translated is None:
                raise
            raise translated from ex

        return await self._load(book_id)

    async def remove(self, book_id: str) -> None:
        """
        Delete a book.

        Raises:
            NotFoundError: If no book has this ID.
        """
        book = await self.find_one(book_id)
        await self.repository.delete(book)
        logger.info(f"Deleted book {book_id}")
