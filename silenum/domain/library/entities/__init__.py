from .book import Book
from .tag import Tag

__all__ = [
    "Book",
    "Tag",
]
