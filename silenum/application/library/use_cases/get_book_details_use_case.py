"""
Use case for loading a book together with its tags.
"""

import structlog

from silenum.application.library.protocols.book_repository import BookRepositoryProtocol
from silenum.application.library.protocols.tag_repository import TagRepositoryProtocol
from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.book import Book
from silenum.domain.library.exceptions import BookNotFoundError

logger = structlog.get_logger(__name__)


class GetBookDetailsUseCase:
    """Use case for loading a book with its tag relation assembled."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.tag_repository = tag_repository

    def get_book(self, book_id: int, user_id: int) -> Book:
        """
        Get a book with its tags attached.

        Args:
            book_id: ID of the book
            user_id: ID of the user

        Returns:
            Book domain entity with tags

        Raises:
            BookNotFoundError: If the book does not exist, is owned by
                another user, or was soft-deleted
        """
        book_id_vo = BookId(book_id)
        user_id_vo = UserId(user_id)

        book = self.book_repository.find_by_id(book_id_vo, user_id_vo)
        if not book:
            raise BookNotFoundError(book_id)

        book.assign_tags(self.tag_repository.find_tags_for_book(book_id_vo, user_id_vo))

        logger.debug("loaded_book_details", book_id=book_id, tag_count=len(book.tags))
        return book
