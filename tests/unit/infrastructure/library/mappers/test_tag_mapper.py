from datetime import UTC, datetime

from silenum.domain.common.value_objects.ids import TagId, UserId
from silenum.domain.library.entities.tag import Tag
from silenum.infrastructure.library.mappers.tag_mapper import TagMapper
from silenum.models import Tag as TagORM

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


class TestTagMapper:
    """Test suite for Tag ORM ↔ Domain conversion."""

    def test_to_domain(self) -> None:
        orm_model = TagORM(id=3, user_id=7, name="fiction", created_at=NOW, updated_at=NOW)

        tag = TagMapper().to_domain(orm_model)

        assert tag is not None
        assert tag.id == TagId(3)
        assert tag.user_id == UserId(7)
        assert tag.name == "fiction"
        assert tag.created_at == NOW

    def test_to_domain_refuses_unflushed_model(self) -> None:
        orm_model = TagORM(user_id=7, name="fiction")

        assert TagMapper().to_domain(orm_model) is None

    def test_to_entity_leaves_placeholder_id_to_database(self) -> None:
        tag = Tag.create(user_id=UserId(7), name="fiction")

        orm_model = TagMapper().to_entity(tag)

        assert orm_model.id is None
        assert orm_model.user_id == 7
        assert orm_model.name == "fiction"

    def test_to_entity_keeps_persisted_id(self) -> None:
        tag = Tag.create_with_id(
            id=TagId(3), user_id=UserId(7), name="fiction", created_at=NOW, updated_at=NOW
        )

        assert TagMapper().to_entity(tag).id == 3

    def test_round_trip_preserves_fields(self) -> None:
        mapper = TagMapper()
        tag = Tag.create_with_id(
            id=TagId(3), user_id=UserId(7), name="fiction", created_at=NOW, updated_at=NOW
        )

        restored = mapper.to_domain(mapper.to_entity(tag))

        assert restored is not None
        assert (restored.id, restored.user_id, restored.name) == (tag.id, tag.user_id, tag.name)
        assert (restored.created_at, restored.updated_at) == (tag.created_at, tag.updated_at)
