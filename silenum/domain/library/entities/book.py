from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

from silenum.domain.common.entity import Entity
from silenum.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from silenum.domain.common.value_objects.ids import BookId, UserId
from silenum.domain.library.entities.tag import Tag


@dataclass(eq=False, repr=False)
class Book(Entity[BookId]):
    """
    Book aggregate root.

    Represents a book in a user's library. ``tags`` is a relation field:
    it is never filled in when a book is loaded from persistence, callers
    attach tags explicitly with ``assign_tags``.
    """

    # Identity
    id: BookId
    user_id: UserId

    # Essential metadata
    title: str

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Optional fields
    author: str | None = None
    isbn: str | None = None
    description: str | None = None
    language: str | None = None
    page_count: int | None = None
    last_viewed: datetime | None = None
    deleted_at: datetime | None = None

    # Relations
    tags: set[Tag] = field(default_factory=set)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Book title cannot be empty", field="title", value=self.title)

        if self.page_count is not None and self.page_count < 0:
            raise ValidationError(
                "Page count cannot be negative", field="page_count", value=self.page_count
            )

    # Query methods
    def has_been_viewed(self) -> bool:
        """Check if book has been viewed."""
        return self.last_viewed is not None

    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def tag_names(self) -> list[str]:
        """Names of the attached tags, sorted alphabetically."""
        return sorted(tag.name for tag in self.tags)

    # Command methods
    def mark_as_viewed(self) -> None:
        """Update last viewed timestamp to now."""
        self.last_viewed = datetime.now(UTC)
        self.updated_at = self.last_viewed

    def soft_delete(self) -> None:
        if self.deleted_at is None:
            self.deleted_at = datetime.now(UTC)
            self.updated_at = self.deleted_at

    def assign_tags(self, tags: Iterable[Tag]) -> None:
        """
        Replace the book's tags.

        Raises:
            BusinessRuleViolationError: If a tag belongs to another user
        """
        new_tags = set(tags)
        for tag in new_tags:
            if tag.user_id != self.user_id:
                raise BusinessRuleViolationError(
                    "tag_owner_mismatch",
                    f"Tag '{tag.name}' does not belong to user {self.user_id}",
                )
        self.tags = new_tags

    # Factory methods
    @classmethod
    def create(
        cls,
        user_id: UserId,
        title: str,
        author: str | None = None,
        isbn: str | None = None,
        description: str | None = None,
        language: str | None = None,
        page_count: int | None = None,
        tags: Iterable[Tag] = (),
    ) -> "Book":
        """Factory for creating new book."""
        now = datetime.now(UTC)
        book = cls(
            id=BookId.generate(),
            user_id=user_id,
            title=title.strip(),
            author=author.strip() if author else None,
            isbn=isbn,
            description=description,
            language=language,
            page_count=page_count,
            created_at=now,
            updated_at=now,
        )
        book.assign_tags(tags)
        return book

    @classmethod
    def create_with_id(
        cls,
        id: BookId,
        user_id: UserId,
        title: str,
        created_at: datetime,
        updated_at: datetime,
        author: str | None = None,
        isbn: str | None = None,
        description: str | None = None,
        language: str | None = None,
        page_count: int | None = None,
        last_viewed: datetime | None = None,
        deleted_at: datetime | None = None,
    ) -> "Book":
        """Factory for reconstituting book from persistence. Tags are left empty."""
        return cls(
            id=id,
            user_id=user_id,
            title=title,
            author=author,
            isbn=isbn,
            description=description,
            language=language,
            page_count=page_count,
            created_at=created_at,
            updated_at=updated_at,
            last_viewed=last_viewed,
            deleted_at=deleted_at,
        )
