"""Error envelope models shared by every HTTP error response."""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Machine-readable error codes."""

    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    DATABASE_ERROR = "database_error"
    INTERNAL_ERROR = "internal_error"


class ErrorEnvelope(BaseModel):  # type: ignore[misc]
    code: str
    msg: str
    details: dict[str, Any] | list[Any] | None = None


class HTTPErrorResponse(BaseModel):  # type: ignore[misc]
    error: ErrorEnvelope
