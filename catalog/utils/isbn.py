"""ISBN-10 / ISBN-13 format and checksum validation."""

import re

_SEPARATORS = re.compile(r"[\s-]")
_ISBN10 = re.compile(r"^\d{9}[\dX]$")
_ISBN13 = re.compile(r"^\d{13}$")


def normalize_isbn(raw: str) -> str:
    """Strip hyphens and spaces and upper-case a trailing 'x'."""
    return _SEPARATORS.sub("", raw).upper()


def _isbn10_checksum_ok(digits: str) -> bool:
    total = 0
    for position, char in enumerate(digits, 1):
        value = 10 if char == "X" else int(char)
        total += position * value
    return total % 11 == 0


def _isbn13_checksum_ok(digits: str) -> bool:
    total = sum(
        int(char) * (1 if index % 2 == 0 else 3)
        for index, char in enumerate(digits[:-1])
    )
    return (10 - total % 10) % 10 == int(digits[-1])


def is_valid_isbn(isbn: str) -> bool:
    """
    Check that `isbn` is a well-formed ISBN-10 or ISBN-13.

    Hyphens and spaces are ignored. The check digit must match.

    Example:
        >>> is_valid_isbn("978-0-14-143951-8")
        True
        >>> is_valid_isbn("0-306-40615-2")
        True
        >>> is_valid_isbn("978-0-14-143951-9")
        False
    """
    if not isbn:
        return False
    digits = normalize_isbn(isbn)
    if _ISBN10.match(digits):
        return _isbn10_checksum_ok(digits)
    if _ISBN13.match(digits):
        return _isbn13_checksum_ok(digits)
    return False
