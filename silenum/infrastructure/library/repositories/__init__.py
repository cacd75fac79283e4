"""Infrastructure layer repositories for library bounded context."""

from silenum.infrastructure.library.repositories.book_repository import BookRepository
from silenum.infrastructure.library.repositories.tag_repository import TagRepository

__all__ = ["BookRepository", "TagRepository"]
