"""Library module domain layer."""

from .entities import Book, Tag
from .exceptions import BookNotFoundError

__all__ = [
    "Book",
    "BookNotFoundError",
    "Tag",
]
