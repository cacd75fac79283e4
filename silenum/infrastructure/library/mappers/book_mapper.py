"""
Mapper for converting between Book ORM models and domain entities.

Handles bidirectional conversion:
- ORM model → Domain entity (when loading from database, tags left out)
- Domain entity → ORM model (when persisting to database, tags included)
"""

from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.book import Book
from silenum.infrastructure.library.mappers.tag_mapper import TagMapper
from silenum.infrastructure.mapper import Mapper
from silenum.models import Book as BookORM


class BookMapper(Mapper[Book, BookORM]):
    """Mapper for Book ORM ↔ Domain conversion."""

    def __init__(self, tag_mapper: TagMapper | None = None) -> None:
        self.tag_mapper = tag_mapper or TagMapper()

    def to_domain(self, orm_model: BookORM) -> Book | None:
        """
        Convert ORM model to domain entity.

        Used when loading books from database. ``orm_model.tags`` is never
        touched, so no lazy load is triggered.

        Args:
            orm_model: SQLAlchemy Book model

        Returns:
            Book domain entity, or None for unflushed and soft-deleted rows
        """
        if orm_model.id is None or orm_model.deleted_at is not None:
            return None

        return Book.create_with_id(
            id=BookId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            title=orm_model.title,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            author=orm_model.author,
            isbn=orm_model.isbn,
            description=orm_model.description,
            language=orm_model.language,
            page_count=orm_model.page_count,
            last_viewed=orm_model.last_viewed,
            deleted_at=orm_model.deleted_at,
        )

    def to_entity(self, domain_entity: Book) -> BookORM:
        """
        Convert domain entity to ORM model.

        Used when persisting books to database. Tags are mapped as well so
        the book_tags association is written together with the book.

        Args:
            domain_entity: Book domain entity

        Returns:
            SQLAlchemy Book model
        """
        return BookORM(
            id=None if domain_entity.is_transient else domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            title=domain_entity.title,
            author=domain_entity.author,
            isbn=domain_entity.isbn,
            description=domain_entity.description,
            language=domain_entity.language,
            page_count=domain_entity.page_count,
            last_viewed=domain_entity.last_viewed,
            deleted_at=domain_entity.deleted_at,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
            tags=list(self.tag_mapper.to_entity_set(domain_entity.tags)),
        )
