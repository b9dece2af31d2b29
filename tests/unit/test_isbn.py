"""Tests for ISBN-10 / ISBN-13 validation."""

import pytest

from catalog.utils.isbn import is_valid_isbn, normalize_isbn
from tests.mocks.sample_data import (
    BAD_CHECKSUM_ISBN_13,
    OTHER_ISBN_13,
    THIRD_ISBN_13,
    VALID_ISBN_10,
    VALID_ISBN_13,
)


class TestNormalizeIsbn:
    def test_strips_hyphens_and_spaces(self):
        assert normalize_isbn("978-0 14-143951-8") == "9780141439518"

    def test_uppercases_check_character(self):
        assert normalize_isbn("0-8044-2957-x") == "080442957X"


class TestIsValidIsbn:
    """Format and checksum validation."""

    @pytest.mark.parametrize(
        "isbn",
        [
            VALID_ISBN_13,
            OTHER_ISBN_13,
            THIRD_ISBN_13,
            VALID_ISBN_10,
            "0306406152",
            "080442957X",
            "0-8044-2957-x",
            "978 0 306 40615 7",
        ],
    )
    def test_valid(self, isbn):
        assert is_valid_isbn(isbn) is True

    @pytest.mark.parametrize(
        "isbn",
        [
            "",
            BAD_CHECKSUM_ISBN_13,
            "0-306-40615-3",
            "not-an-isbn",
            "12345",
            "97801414395181",
            "X306406152",
        ],
    )
    def test_invalid(self, isbn):
        assert is_valid_isbn(isbn) is False
