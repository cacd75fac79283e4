"""Tests for the optional and collection conversions derived by Mapper."""

from datetime import UTC, datetime

from silenum.domain.common.value_objects.ids import TagId, UserId
from silenum.domain.library.entities.tag import Tag
from silenum.infrastructure.mapper import Mapper
from silenum.models import Tag as TagORM

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)


class RecordingTagMapper(Mapper[Tag, TagORM]):
    """Tag mapper that refuses drafts and records every single-object call."""

    def __init__(self) -> None:
        self.to_domain_calls: list[TagORM] = []
        self.to_entity_calls: list[Tag] = []

    def to_domain(self, orm_model: TagORM) -> Tag | None:
        self.to_domain_calls.append(orm_model)
        if orm_model.name.startswith("draft"):
            return None
        return Tag.create_with_id(
            id=TagId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            name=orm_model.name,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_entity(self, domain_entity: Tag) -> TagORM:
        self.to_entity_calls.append(domain_entity)
        return TagORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            name=domain_entity.name,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )


def _orm(tag_id: int, name: str) -> TagORM:
    return TagORM(id=tag_id, user_id=1, name=name, created_at=NOW, updated_at=NOW)


def _domain(tag_id: int, name: str) -> Tag:
    return Tag.create_with_id(
        id=TagId(tag_id), user_id=UserId(1), name=name, created_at=NOW, updated_at=NOW
    )


class TestToDomainOptional:
    def test_present_model_delegates_to_to_domain(self) -> None:
        mapper = RecordingTagMapper()
        orm_model = _orm(1, "fiction")

        assert mapper.to_domain_optional(orm_model) == mapper.to_domain(orm_model)
        assert mapper.to_domain_calls == [orm_model, orm_model]

    def test_missing_model_returns_none_without_converting(self) -> None:
        mapper = RecordingTagMapper()

        assert mapper.to_domain_optional(None) is None
        assert mapper.to_domain_calls == []

    def test_refused_model_returns_none(self) -> None:
        assert RecordingTagMapper().to_domain_optional(_orm(1, "draft-1")) is None


class TestToDomainSet:
    def test_none_yields_empty_set(self) -> None:
        assert RecordingTagMapper().to_domain_set(None) == set()

    def test_empty_collection_yields_empty_set(self) -> None:
        assert RecordingTagMapper().to_domain_set([]) == set()

    def test_refused_models_are_dropped(self) -> None:
        """Given e1 -> d1 and e2 -> None, the set holds only d1."""
        mapper = RecordingTagMapper()

        result = mapper.to_domain_set([_orm(1, "fiction"), _orm(2, "draft-2")])

        assert result == {_domain(1, "fiction")}
        assert len(mapper.to_domain_calls) == 2

    def test_size_equals_number_of_converted_models(self) -> None:
        orm_models = [
            _orm(1, "fiction"),
            _orm(2, "draft-a"),
            _orm(3, "history"),
            _orm(4, "draft-b"),
            _orm(5, "poetry"),
        ]

        result = RecordingTagMapper().to_domain_set(orm_models)

        assert len(result) == 3
        assert {tag.name for tag in result} == {"fiction", "history", "poetry"}

    def test_equal_results_collapse(self) -> None:
        result = RecordingTagMapper().to_domain_set([_orm(1, "fiction"), _orm(1, "fiction")])

        assert len(result) == 1

    def test_accepts_any_iterable(self) -> None:
        orm_models = (_orm(tag_id, f"tag-{tag_id}") for tag_id in range(1, 4))

        assert len(RecordingTagMapper().to_domain_set(orm_models)) == 3


class TestToEntitySet:
    def test_none_yields_empty_set(self) -> None:
        assert RecordingTagMapper().to_entity_set(None) == set()

    def test_every_domain_entity_is_converted(self) -> None:
        mapper = RecordingTagMapper()
        tags = [_domain(1, "fiction"), _domain(2, "draft-but-still-mapped")]

        result = mapper.to_entity_set(tags)

        assert len(result) == 2
        assert all(isinstance(orm_model, TagORM) for orm_model in result)
        assert {orm_model.name for orm_model in result} == {
            "fiction",
            "draft-but-still-mapped",
        }
        assert mapper.to_entity_calls == tags
