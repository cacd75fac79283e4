from .book_repository import BookRepositoryProtocol
from .tag_repository import TagRepositoryProtocol

__all__ = [
    "BookRepositoryProtocol",
    "TagRepositoryProtocol",
]
