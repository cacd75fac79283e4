"""Repository for Tag domain entity."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from silenum.domain.common.value_objects.ids import BookId, TagId, UserId
from silenum.domain.library.entities.tag import Tag
from silenum.infrastructure.library.mappers.tag_mapper import TagMapper
from silenum.models import Book as BookORM
from silenum.models import Tag as TagORM
from silenum.models import book_tags

logger = logging.getLogger(__name__)


class TagRepository:
    """Repository for Tag domain entity."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TagMapper()

    def find_by_id(self, tag_id: TagId, user_id: UserId) -> Tag | None:
        """Find tag by ID with user ownership check."""
        stmt = select(TagORM).where(
            TagORM.id == tag_id.value,
            TagORM.user_id == user_id.value,
        )
        return self.mapper.to_domain_optional(self.db.execute(stmt).scalar_one_or_none())

    def find_by_user(self, user_id: UserId) -> set[Tag]:
        """Get all tags owned by a user."""
        stmt = select(TagORM).where(TagORM.user_id == user_id.value)
        return self.mapper.to_domain_set(self.db.execute(stmt).scalars().all())

    def _find_by_names(self, names: list[str], user_id: UserId) -> set[Tag]:
        """
        Get multiple tags by their names for a specific user in a single query.

        Args:
            names: List of tag names
            user_id: The user ID

        Returns:
            Set of tag entities
        """
        if not names:
            return set()

        stmt = select(TagORM).where(
            TagORM.name.in_(names),
            TagORM.user_id == user_id.value,
        )
        return self.mapper.to_domain_set(self.db.execute(stmt).scalars().all())

    def find_tags_for_book(self, book_id: BookId, user_id: UserId) -> set[Tag]:
        """
        Get all tags associated with a book.

        Args:
            book_id: The book ID
            user_id: The user ID

        Returns:
            Set of tag entities
        """
        stmt = (
            select(TagORM)
            .join(book_tags, book_tags.c.tag_id == TagORM.id)
            .join(BookORM, BookORM.id == book_tags.c.book_id)
            .where(
                BookORM.id == book_id.value,
                BookORM.user_id == user_id.value,
            )
        )
        return self.mapper.to_domain_set(self.db.execute(stmt).scalars().all())

    def get_or_create_many(self, names: list[str], user_id: UserId) -> set[Tag]:
        """
        Get existing tags or create new ones for a list of names.

        Uses bulk operations to minimize database queries:
        1. Single query to fetch all existing tags by name
        2. Single bulk insert for new tags

        Args:
            names: List of tag names
            user_id: The user ID

        Returns:
            Set of tag entities (mix of existing and newly created)
        """
        # Normalize names (strip whitespace, filter empty, drop duplicates)
        normalized = list(dict.fromkeys(name.strip() for name in names if name.strip()))
        if not normalized:
            return set()

        existing_tags = self._find_by_names(normalized, user_id)
        existing_names = {tag.name for tag in existing_tags}

        new_names = [name for name in normalized if name not in existing_names]
        if not new_names:
            return existing_tags

        new_tag_orms = [TagORM(name=name, user_id=user_id.value) for name in new_names]
        self.db.add_all(new_tag_orms)
        self.db.flush()
        logger.info(f"Created {len(new_tag_orms)} tags for user {user_id}")

        return existing_tags | self.mapper.to_domain_set(new_tag_orms)
