"""
Use case for creating a book.
"""

import structlog

from silenum.application.library.protocols.book_repository import BookRepositoryProtocol
from silenum.application.library.protocols.tag_repository import TagRepositoryProtocol
from silenum.domain.common.exceptions import DomainError
from silenum.domain.common.value_objects.ids import UserId
from silenum.domain.library.entities.book import Book

logger = structlog.get_logger(__name__)


class CreateBookUseCase:
    """Use case for creating a book, tags included."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.tag_repository = tag_repository

    def create_book(
        self,
        user_id: int,
        title: str,
        tag_names: list[str] | None = None,
        author: str | None = None,
        isbn: str | None = None,
        description: str | None = None,
        language: str | None = None,
        page_count: int | None = None,
    ) -> Book:
        """
        Create a book and tag it.

        Missing tags are created on the fly.

        Returns:
            The persisted book with its tags attached

        Raises:
            ValidationError: If the book metadata is invalid
        """
        user_id_vo = UserId(user_id)

        tags = self.tag_repository.get_or_create_many(tag_names or [], user_id_vo)
        book = Book.create(
            user_id=user_id_vo,
            title=title,
            author=author,
            isbn=isbn,
            description=description,
            language=language,
            page_count=page_count,
            tags=tags,
        )

        saved = self.book_repository.save(book)
        if saved is None:
            raise DomainError("Book could not be persisted", {"title": title})
        saved.assign_tags(tags)

        logger.info(
            "created_book",
            book_id=saved.id.value,
            user_id=user_id,
            tag_names=saved.tag_names(),
        )
        return saved
