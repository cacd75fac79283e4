"""Repository for Book domain entity."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.book import Book
from silenum.infrastructure.library.mappers.book_mapper import BookMapper
from silenum.models import Book as BookORM

logger = logging.getLogger(__name__)


class BookRepository:
    """Domain-centric repository for Book persistence."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = BookMapper()

    def find_by_id(self, book_id: BookId, user_id: UserId) -> Book | None:
        """
        Find book by ID with user ownership check.

        Soft-deleted books are filtered out by the mapper. Tags are not loaded.
        """
        stmt = (
            select(BookORM)
            .where(BookORM.id == book_id.value)
            .where(BookORM.user_id == user_id.value)
        )
        return self.mapper.to_domain_optional(self.db.execute(stmt).scalar_one_or_none())

    def find_by_user(self, user_id: UserId) -> set[Book]:
        """Get all live books owned by a user, without tags."""
        stmt = select(BookORM).where(BookORM.user_id == user_id.value)
        return self.mapper.to_domain_set(self.db.execute(stmt).scalars().all())

    def save(self, book: Book) -> Book | None:
        """
        Persist book and its tag associations.

        ``book.tags`` is written as the complete association, so a book
        fetched from this repository needs its tags assigned before saving.
        The mapped model is merged into the session, so tags that already
        exist are reused instead of inserted again.

        Returns:
            The persisted book without tags, or None if it was soft-deleted
        """
        orm_model = self.db.merge(self.mapper.to_entity(book))
        self.db.flush()
        if book.is_transient:
            logger.info(f"Created book '{book.title}' (id={orm_model.id})")
        else:
            logger.info(f"Updated book {book.id}")
        return self.mapper.to_domain(orm_model)

    def delete(self, book: Book) -> None:
        """
        Hard delete a book from the database.

        Only the owner's row is removed; unsaved books and rows owned by
        another user are left alone. Tag associations are removed, the tags
        themselves are kept.
        """
        if book.is_transient:
            return

        stmt = (
            select(BookORM)
            .where(BookORM.id == book.id.value)
            .where(BookORM.user_id == book.user_id.value)
        )
        book_orm = self.db.execute(stmt).scalar_one_or_none()
        if book_orm is None:
            return

        self.db.delete(book_orm)
        self.db.flush()
        logger.info(f"Deleted book {book.id}")
