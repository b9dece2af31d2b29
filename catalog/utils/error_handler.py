"""
Exception handlers that render every error as the same JSON envelope.

- AppException subclasses use their own http_status and message.
- Request validation failures become 400 with the pydantic error list.
- Database errors that escaped the services become 500.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog.exceptions import AppException, DatabaseError, ValidationError
from catalog.logging import logger


def _envelope_response(ex: AppException) -> JSONResponse:
    return JSONResponse(
        status_code=ex.http_status,
        content=jsonable_encoder(ex.to_http_response()),
    )


async def app_exception_handler(
    request: Request, ex: AppException
) -> JSONResponse:
    """
    Convert an AppException into its HTTP error envelope.

    Args:
        request: The request that failed.
        ex: The raised application exception.

    Returns:
        JSONResponse with the exception's status code.
    """
    logger.warning(
        f"AppException in {request.method} {request.url.path}: {ex.message}",
        extra={"exception_type": type(ex).__name__},
    )
    return _envelope_response(ex)


async def request_validation_handler(
    request: Request, ex: RequestValidationError
) -> JSONResponse:
    """Render malformed path, query or body input as 400."""
    logger.warning(
        f"Validation failed for {request.method} {request.url.path}",
        extra={"exception_type": type(ex).__name__},
    )
    error = ValidationError(
        "Request validation failed",
        details={"errors": jsonable_encoder(ex.errors())},
    )
    return _envelope_response(error)


async def database_error_handler(
    request: Request, ex: SQLAlchemyError
) -> JSONResponse:
    """Render an unexpected database error as 500."""
    logger.error(
        f"Database error in {request.method} {request.url.path}: {ex}",
        exc_info=True,
    )
    return _envelope_response(DatabaseError("Database error occurred"))


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the catalog exception handlers on `app`.

    Example:
        ```python
        app = FastAPI()
        register_exception_handlers(app)
        ```
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_error_handler)


__all__ = [
    "app_exception_handler",
    "request_validation_handler",
    "database_error_handler",
    "register_exception_handlers",
]
