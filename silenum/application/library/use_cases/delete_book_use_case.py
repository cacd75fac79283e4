"""
Use case for deleting a book.
"""

import structlog

from silenum.application.library.protocols.book_repository import BookRepositoryProtocol
from silenum.application.library.protocols.tag_repository import TagRepositoryProtocol
from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.exceptions import BookNotFoundError

logger = structlog.get_logger(__name__)


class DeleteBookUseCase:
    """Use case for deleting a book."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.tag_repository = tag_repository

    def delete_book(self, book_id: int, user_id: int, hard: bool = False) -> None:
        """
        Delete a book.

        A soft delete keeps the row and its tags but hides the book from
        every lookup; a hard delete removes the row and its tag associations.

        Raises:
            BookNotFoundError: If book not found
        """
        book_id_vo = BookId(book_id)
        user_id_vo = UserId(user_id)

        book = self.book_repository.find_by_id(book_id_vo, user_id_vo)
        if not book:
            raise BookNotFoundError(book_id)

        if hard:
            self.book_repository.delete(book)
        else:
            # Saving writes the full tag association, so it has to be loaded first
            book.assign_tags(self.tag_repository.find_tags_for_book(book_id_vo, user_id_vo))
            book.soft_delete()
            self.book_repository.save(book)

        logger.info("deleted_book", book_id=book_id, user_id=user_id, hard=hard)
