from datetime import date
from typing import TYPE_CHECKING

from sqlmodel import Relationship

from catalog.models.base import BaseModel

if TYPE_CHECKING:
    from catalog.models.book import Book


class Author(BaseModel, table=True):
    """
    SQLModel representing an author entity in the database.

    This is a clean data model without Active Record methods.
    Use AuthorRepository for all database operations.

    Deleting an author that still has books is rejected by the book
    foreign key; the relationship never touches the books on delete.

    Attributes:
        first_name: Given name of the author
        last_name: Family name of the author
        bio: Optional free-text biography
        birth_date: Optional date of birth
        books: Books written by this author
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    first_name: str
    last_name: str
    bio: str | None = None
    birth_date: date | None = None

    books: list["Book"] = Relationship(
        back_populates="author",
        sa_relationship_kwargs={"passive_deletes": "all"},
    )
