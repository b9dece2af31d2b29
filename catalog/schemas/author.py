"""Request and response schemas for authors."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from catalog.schemas.types import IsoDate


class CreateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for creating an author."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    first_name: str = Field(..., min_length=1, description="Given name")
    last_name: str = Field(..., min_length=1, description="Family name")
    bio: str | None = Field(default=None, description="Short biography")
    birth_date: IsoDate | None = Field(
        default=None, description="Date of birth (ISO 8601)"
    )


class UpdateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for a partial author update. Only sent fields change."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")

    first_name: str | None = Field(default=None, min_length=1)
    last_name: str | None = Field(default=None, min_length=1)
    bio: str | None = None
    birth_date: IsoDate | None = None

    @field_validator("first_name", "last_name")
    @classmethod
    def reject_null(cls, value: str | None) -> str:
        if value is None:
            raise ValueError("must not be null")
        return value


class AuthorRead(BaseModel):  # type: ignore[misc]
    """Author as returned by the API."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    first_name: str
    last_name: str
    bio: str | None = None
    birth_date: date | None = None
    created_at: datetime
    updated_at: datetime
