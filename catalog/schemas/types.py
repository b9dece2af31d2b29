"""Reusable annotated field types for request schemas."""

import re
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator

from catalog.utils.isbn import is_valid_isbn

# Reduced precision calendar dates: "1775" and "1775-12"
_YEAR_RE = re.compile(r"(\d{4})")
_YEAR_MONTH_RE = re.compile(r"(\d{4})-(\d{2})")


def parse_iso_date(value: Any) -> date:
    """
    Parse an ISO 8601 date or date-time string into a date.

    Accepted forms:
    - calendar dates, "1775-12-16"
    - reduced precision dates, "1775" and "1775-12" (first day of the period)
    - date-times separated by "T" or a space, "1775-12-16 10:00"

    Only strings are accepted; numbers and other JSON types are rejected so
    that timestamps are never silently interpreted as dates.
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("must be a valid ISO 8601 date string")
    try:
        if match := _YEAR_RE.fullmatch(value):
            return date(int(match.group(1)), 1, 1)
        if match := _YEAR_MONTH_RE.fullmatch(value):
            return date(int(match.group(1)), int(match.group(2)), 1)
        if "T" in value or " " in value:
            return datetime.fromisoformat(value).date()
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError("must be a valid ISO 8601 date string") from None


def check_isbn(value: str) -> str:
    if not is_valid_isbn(value):
        raise ValueError("must be an ISBN")
    return value


IsoDate = Annotated[date, BeforeValidator(parse_iso_date)]
IsbnStr = Annotated[str, AfterValidator(check_isbn)]
