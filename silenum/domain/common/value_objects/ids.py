from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: int


@dataclass(frozen=True)
class BookId(EntityId):
    """Strongly-typed book identifier."""

    value: int


@dataclass(frozen=True)
class TagId(EntityId):
    """Strongly-typed tag identifier."""

    value: int
