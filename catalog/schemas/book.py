"""Request and response schemas for books."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from catalog.schemas.author import AuthorRead
from catalog.schemas.types import IsbnStr, IsoDate


class CreateBookInput(BaseModel):  # type: ignore[misc]
    """Input model for creating a book."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    title: str = Field(..., min_length=1, description="Book title")
    isbn: IsbnStr = Field(..., description="ISBN-10 or ISBN-13")
    published_date: IsoDate | None = Field(
        default=None, description="Publication date (ISO 8601)"
    )
    genre: str | None = Field(default=None, description="Genre")
    author_id: str = Field(..., min_length=1, description="Author ID")


class UpdateBookInput(BaseModel):  # type: ignore[misc]
    """Input model for a partial book update. Only sent fields change."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    isbn: IsbnStr | None = None
    published_date: IsoDate | None = None
    genre: str | None = None
    author_id: str | None = Field(default=None, min_length=1)

    @field_validator("title", "isbn", "author_id")
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("must not be null")
        return value


class BookRead(BaseModel):  # type: ignore[misc]
    """Book as returned by the API, with its author embedded."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    title: str
    isbn: str
    published_date: date | None = None
    genre: str | None = None
    author_id: str
    created_at: datetime
    updated_at: datetime
    author: AuthorRead | None = None
