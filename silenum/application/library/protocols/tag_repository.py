"""Protocol for Tag repository in library context."""

from typing import Protocol

from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.tag import Tag


class TagRepositoryProtocol(Protocol):
    """Protocol for Tag repository operations in library context."""

    def find_tags_for_book(self, book_id: BookId, user_id: UserId) -> set[Tag]:
        """
        Get all tags associated with a book.

        Args:
            book_id: The book ID
            user_id: The user ID

        Returns:
            Set of tag entities
        """
        ...

    def get_or_create_many(self, names: list[str], user_id: UserId) -> set[Tag]:
        """
        Get existing tags or create new ones for a list of names.

        Args:
            names: List of tag names
            user_id: The user ID

        Returns:
            Set of tag entities (mix of existing and newly created)
        """
        ...
