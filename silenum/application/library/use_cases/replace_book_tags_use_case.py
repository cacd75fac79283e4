"""
Use case for replacing all tags on a book.
"""

import structlog

from silenum.application.library.protocols.book_repository import BookRepositoryProtocol
from silenum.application.library.protocols.tag_repository import TagRepositoryProtocol
from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.tag import Tag
from silenum.domain.library.exceptions import BookNotFoundError

logger = structlog.get_logger(__name__)


class ReplaceBookTagsUseCase:
    """Use case for replacing all tags on a book."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.tag_repository = tag_repository

    def replace_tags(self, book_id: int, tag_names: list[str], user_id: int) -> set[Tag]:
        """
        Replace all tags on a book.

        The new tag set travels to the database through the book mapper,
        which writes the whole association.

        Args:
            book_id: ID of the book
            tag_names: List of tag names (will replace all existing tags)
            user_id: ID of the user

        Returns:
            New tags for the book

        Raises:
            BookNotFoundError: If book not found
        """
        book_id_vo = BookId(book_id)
        user_id_vo = UserId(user_id)

        book = self.book_repository.find_by_id(book_id_vo, user_id_vo)
        if not book:
            raise BookNotFoundError(book_id)

        tags = self.tag_repository.get_or_create_many(tag_names, user_id_vo)
        book.assign_tags(tags)
        self.book_repository.save(book)

        logger.info(
            "replaced_book_tags",
            book_id=book_id,
            tag_count=len(tags),
            tag_names=book.tag_names(),
        )

        return tags
