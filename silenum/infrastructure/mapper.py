"""
Generic contract for converting between domain entities and ORM models.

One concrete mapper exists per (domain type, ORM type) pair. Subclasses
implement the two single-object conversions; the optional and collection
variants are derived from them.

The two directions are deliberately asymmetric:
- ORM -> domain may be refused (``to_domain`` returns ``None``) and never
  maps relations. The business layer assembles relations per use case.
- domain -> ORM always succeeds and maps relations fully, so SQLAlchemy
  can persist the whole graph.

Implementations MUST be pure (no I/O, no session usage).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from silenum.database import Base
from silenum.domain.common.entity import Entity

D = TypeVar("D", bound=Entity)  # Domain entity type
E = TypeVar("E", bound=Base)  # ORM model type


class Mapper(ABC, Generic[D, E]):
    """Base mapper for ORM ↔ Domain conversion."""

    @abstractmethod
    def to_domain(self, orm_model: E) -> D | None:
        """
        Convert ORM model to domain entity.

        Relations are not mapped. Returns ``None`` when the model has no
        meaningful domain counterpart; each mapper defines when that is.
        """

    @abstractmethod
    def to_entity(self, domain_entity: D) -> E:
        """Convert domain entity to ORM model, relations included."""

    def to_domain_optional(self, orm_model: E | None) -> D | None:
        """Convert a possibly missing ORM model, e.g. a ``scalar_one_or_none`` result."""
        if orm_model is None:
            return None
        return self.to_domain(orm_model)

    def to_domain_set(self, orm_models: Iterable[E] | None) -> set[D]:
        """Convert ORM models, dropping the ones without a domain counterpart."""
        if orm_models is None:
            return set()
        return {
            domain_entity
            for domain_entity in (self.to_domain(orm_model) for orm_model in orm_models)
            if domain_entity is not None
        }

    def to_entity_set(self, domain_entities: Iterable[D] | None) -> set[E]:
        """Convert domain entities to ORM models."""
        if domain_entities is None:
            return set()
        return {self.to_entity(domain_entity) for domain_entity in domain_entities}
