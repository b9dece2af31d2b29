"""
Author endpoints.

Each endpoint validates its input through the schema models and delegates
to AuthorService; errors are rendered by the handlers registered in
catalog.utils.error_handler.
"""

from fastapi import APIRouter, Query, status

from catalog.constants import MAX_PAGE, MAX_PAGE_SIZE
from catalog.dependencies import AuthorServiceDep
from catalog.schemas.author import AuthorRead, CreateAuthorInput, UpdateAuthorInput
from catalog.settings import app_settings

router = APIRouter(prefix="/authors", tags=["authors"])


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
)
async def create_author(
    author_data: CreateAuthorInput, service: AuthorServiceDep
) -> AuthorRead:
    """
    Create a new author.

    Example:
        POST /authors
        {
            "firstName": "Jane",
            "lastName": "Austen",
            "birthDate": "1775-12-16"
        }
    """
    author = await service.create(author_data)
    return AuthorRead.model_validate(author)


@router.get(
    "",
    response_model=list[AuthorRead],
    summary="List authors",
)
async def get_authors(
    service: AuthorServiceDep,
    page: int = Query(1, ge=1, le=MAX_PAGE),
    limit: int = Query(app_settings.DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    search: str | None = None,
) -> list[AuthorRead]:
    """
    List authors with pagination and optional name search.

    Example:
        GET /authors?page=2&limit=5&search=aust
    """
    authors = await service.find_all(page, limit, search)
    return [AuthorRead.model_validate(author) for author in authors]


@router.get(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Get an author",
)
async def get_author(author_id: str, service: AuthorServiceDep) -> AuthorRead:
    author = await service.find_one(author_id)
    return AuthorRead.model_validate(author)


@router.patch(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Update an author",
)
async def update_author(
    author_id: str,
    author_data: UpdateAuthorInput,
    service: AuthorServiceDep,
) -> AuthorRead:
    """
    Partially update an author. Only the fields present in the body change.

    Example:
        PATCH /authors/1b7c...
        {
            "bio": "English novelist"
        }
    """
    author = await service.update(author_id, author_data)
    return AuthorRead.model_validate(author)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
)
async def delete_author(author_id: str, service: AuthorServiceDep) -> None:
    """
    Delete an author.

    Fails with 500 while the author still has books, because the book
    foreign key rejects the delete.
    """
    await service.remove(author_id)
