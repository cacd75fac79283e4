"""
Identity for domain objects.

A domain object mapped from a database row is identified by the row's
primary key, wrapped in a typed id so a ``BookId`` can never be passed
where a ``TagId`` is expected. Objects that have not been saved yet carry
the placeholder id ``0`` and only equal themselves.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

PLACEHOLDER_ID = 0


@dataclass(frozen=True)
class EntityId:
    """Primary key of a domain object; ``0`` until the database assigns one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_placeholder(self) -> bool:
        return self.value == PLACEHOLDER_ID

    @classmethod
    def generate(cls) -> Self:
        """Id for an object that is about to be inserted."""
        return cls(PLACEHOLDER_ID)

    def to_primitive(self) -> int:
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base for domain objects with a database identity.

    Saved objects compare and hash by id, so two loads of the same row are
    interchangeable in a set. Transient objects compare by object identity.

    Subclasses are declared ``@dataclass(eq=False, repr=False)`` so the
    dataclass machinery keeps this class's ``__eq__``, ``__hash__`` and
    ``__repr__``.
    """

    id: IdType

    @property
    def is_transient(self) -> bool:
        return self.id.is_placeholder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        if self.is_transient or other.is_transient:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.is_transient:
            return id(self)
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
