from catalog.models.author import Author
from catalog.models.book import Book

__all__ = ["Author", "Book"]
