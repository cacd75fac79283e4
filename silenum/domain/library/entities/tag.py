"""A user's label for grouping books in their library."""

from dataclasses import dataclass
from datetime import UTC, datetime

from silenum.domain.common.entity import Entity
from silenum.domain.common.exceptions import ValidationError
from silenum.domain.common.value_objects.ids import TagId, UserId

MAX_TAG_NAME_LENGTH = 100


def normalize_tag_name(name: str) -> str:
    """
    Trim a tag name and check it fits the ``tags.name`` column.

    Raises:
        ValidationError: If the trimmed name is empty or too long
    """
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError("Tag name cannot be empty", field="name", value=name)
    if len(trimmed) > MAX_TAG_NAME_LENGTH:
        raise ValidationError(
            f"Tag name cannot exceed {MAX_TAG_NAME_LENGTH} characters", field="name", value=name
        )
    return trimmed


@dataclass(eq=False, repr=False)
class Tag(Entity[TagId]):
    """
    Label owned by one user. Names are unique per user, which the
    ``uq_tags_user_id_name`` constraint enforces on insert.
    """

    id: TagId
    user_id: UserId
    name: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        self.name = normalize_tag_name(self.name)

    def matches_name(self, search: str) -> bool:
        """Case-insensitive substring match, used for tag lookups by prefix or fragment."""
        return search.casefold() in self.name.casefold()

    @classmethod
    def create(cls, user_id: UserId, name: str) -> "Tag":
        """New, unsaved tag; the database assigns the id on flush."""
        now = datetime.now(UTC)
        return cls(id=TagId.generate(), user_id=user_id, name=name, created_at=now, updated_at=now)

    @classmethod
    def create_with_id(
        cls,
        id: TagId,
        user_id: UserId,
        name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Tag":
        """Rebuild a tag from a stored row."""
        return cls(id=id, user_id=user_id, name=name, created_at=created_at, updated_at=updated_at)
