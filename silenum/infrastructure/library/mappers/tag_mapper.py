"""Mapper for Tag ORM ↔ Domain conversion."""

from silenum.domain.common.value_objects.ids import TagId, UserId
from silenum.domain.library.entities.tag import Tag
from silenum.infrastructure.mapper import Mapper
from silenum.models import Tag as TagORM


class TagMapper(Mapper[Tag, TagORM]):
    """Mapper for Tag ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: TagORM) -> Tag | None:
        """Convert ORM model to domain entity. Unflushed rows have no domain counterpart."""
        if orm_model.id is None:
            return None

        return Tag.create_with_id(
            id=TagId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            name=orm_model.name,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_entity(self, domain_entity: Tag) -> TagORM:
        """Convert domain entity to ORM model."""
        return TagORM(
            id=None if domain_entity.is_transient else domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            name=domain_entity.name,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
