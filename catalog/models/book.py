from datetime import date

from sqlmodel import Field, Relationship

from catalog.models.author import Author
from catalog.models.base import BaseModel


class Book(BaseModel, table=True):
    """
    SQLModel representing a book entity in the database.

    Attributes:
        title: Title of the book
        isbn: ISBN-10 or ISBN-13, unique across all books
        published_date: Optional publication date
        genre: Optional free-text genre
        author_id: Foreign key to the author (required)
        author: The author this book belongs to
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    title: str
    isbn: str = Field(unique=True, index=True)
    published_date: date | None = None
    genre: str | None = None
    author_id: str = Field(foreign_key="author.id", index=True, max_length=36)

    author: Author | None = Relationship(back_populates="books")
