"""Classification of driver-level integrity errors."""

from sqlalchemy.exc import IntegrityError

# SQLSTATE for unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


def _sqlstate(error: IntegrityError) -> str | None:
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def is_unique_violation(error: IntegrityError, column: str) -> bool:
    """
    Check whether `error` is a unique-constraint violation on `column`.

    Works with PostgreSQL (SQLSTATE 23505, constraint or key name contains
    the column) and SQLite ("UNIQUE constraint failed: table.column").

    Args:
        error: The IntegrityError raised by a flush.
        column: Column name the caller can translate, e.g. "isbn".

    Returns:
        True if the violated constraint covers `column`.
    """
    message = str(error.orig).lower()
    unique = (
        _sqlstate(error) == UNIQUE_VIOLATION_SQLSTATE
        or "unique constraint" in message
        or "duplicate key" in message
    )
    return unique and column.lower() in message
