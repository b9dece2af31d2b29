"""
Custom exception classes for the application.

Every exception carries a human-readable message and the HTTP status code it
maps to, so the HTTP layer can render any of them without extra branching.
"""

from typing import Any

from catalog.schemas.errors import ErrorCode, ErrorEnvelope, HTTPErrorResponse


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        http_status: HTTP status code for REST API responses.
        error_code: Machine-readable code used in the error envelope.
        details: Optional structured details for the error envelope.
    """

    http_status: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """
        Initialize the exception with a message.

        Args:
            message: Human-readable error description.
            details: Optional structured details.
        """
        self.message = message
        self.details = details
        super().__init__(message)

    def to_http_response(self) -> HTTPErrorResponse:
        """Build the HTTP error envelope for this exception."""
        return HTTPErrorResponse(
            error=ErrorEnvelope(
                code=self.error_code.value,
                msg=self.message,
                details=self.details,
            )
        )


class ValidationError(AppException):
    """
    Data validation failed.

    Raised when input data fails validation checks before processing.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    error_code = ErrorCode.VALIDATION_ERROR


class NotFoundError(AppException):
    """
    Resource not found.

    HTTP Status: 404 Not Found
    """

    http_status = 404
    error_code = ErrorCode.NOT_FOUND


class BadRequestError(AppException):
    """
    Request conflicts with stored data.

    Raised for a reference to a missing related entity or a duplicate value
    in a unique field. `field` names the offending attribute.

    HTTP Status: 400 Bad Request
    """

    http_status = 400
    error_code = ErrorCode.BAD_REQUEST

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class DatabaseError(AppException):
    """
    Database operation failed.

    HTTP Status: 500 Internal Server Error
    """

    http_status = 500
    error_code = ErrorCode.DATABASE_ERROR
