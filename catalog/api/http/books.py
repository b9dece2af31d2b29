"""Book endpoints. Every book in a response carries its author."""

from fastapi import APIRouter, Query, status

from catalog.constants import MAX_PAGE, MAX_PAGE_SIZE
from catalog.dependencies import BookServiceDep
from catalog.schemas.book import BookRead, CreateBookInput, UpdateBookInput
from catalog.settings import app_settings

router = APIRouter(prefix="/books", tags=["books"])


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
)
async def create_book(
    book_data: CreateBookInput, service: BookServiceDep
) -> BookRead:
    """
    Create a new book for an existing author.

    Returns 400 if the author does not exist or the ISBN is already used.

    Example:
        POST /books
        {
            "title": "Pride and Prejudice",
            "isbn": "978-0-14-143951-8",
            "authorId": "1b7c..."
        }
    """
    book = await service.create(book_data)
    return BookRead.model_validate(book)


@router.get(
    "",
    response_model=list[BookRead],
    summary="List books",
)
async def get_books(
    service: BookServiceDep,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(app_settings.DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = None,
    author_id: str | None = Query(None, alias="authorId"),
) -> list[BookRead]:
    """
    List books with pagination, title/ISBN search and author filter.

    Example:
        GET /books?search=pride&authorId=1b7c...
    """
    books = await service.find_all(page, limit, search, author_id)
    return [BookRead.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Get a book",
)
async def get_book(book_id: str, service: BookServiceDep) -> BookRead:
    book = await service.find_one(book_id)
    return BookRead.model_validate(book)


@router.patch(
    "/{book_id}",
    response_model=BookRead,
    summary="Update a book",
)
async def update_book(
    book_id: str,
    book_data: UpdateBookInput,
    service: BookServiceDep,
) -> BookRead:
    """
    Partially update a book.

    Returns 404 if the book does not exist and 400 if a new authorId is
    unknown or a new ISBN is already used.
    """
    book = await service.update(book_id, book_data)
    return BookRead.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
)
async def delete_book(book_id: str, service: BookServiceDep) -> None:
    await service.remove(book_id)
