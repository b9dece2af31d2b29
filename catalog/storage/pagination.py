"""
Offset-based pagination (page numbers) and substring search helpers.

Example:
    ```python
    from sqlmodel import col, select

    query = select(Author).where(col(Author.last_name).ilike(contains_pattern("aus")))
    query = paginate(query, page=2, limit=5)  # OFFSET 5 LIMIT 5
    ```
"""

from typing import Any

from sqlalchemy import Select

LIKE_ESCAPE_CHAR = "\\"


def calculate_offset(page: int, limit: int) -> int:
    """
    Number of rows to skip for a 1-indexed page.

    Args:
        page: Page number, starting at 1.
        limit: Page size.

    Returns:
        (page - 1) * limit
    """
    return (page - 1) * limit


def paginate(query: Select[Any], page: int, limit: int) -> Select[Any]:
    """Apply OFFSET/LIMIT for the given page to a select statement."""
    return query.offset(calculate_offset(page, limit)).limit(limit)


def contains_pattern(term: str) -> str:
    """
    Build a LIKE pattern matching `term` anywhere in a value.

    LIKE wildcards inside the term are escaped so they match literally;
    use together with `escape=LIKE_ESCAPE_CHAR`.
    """
    escaped = (
        term.replace(LIKE_ESCAPE_CHAR, LIKE_ESCAPE_CHAR * 2)
        .replace("%", f"{LIKE_ESCAPE_CHAR}%")
        .replace("_", f"{LIKE_ESCAPE_CHAR}_")
    )
    return f"%{escaped}%"
