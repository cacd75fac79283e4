from datetime import UTC, datetime

import pytest

from silenum.domain.common.exceptions import ValidationError
from silenum.domain.common.value_objects.ids import TagId, UserId
from silenum.domain.library.entities.tag import Tag, normalize_tag_name


def test_create_strips_name() -> None:
    tag = Tag.create(user_id=UserId(1), name="  fiction  ")

    assert tag.name == "fiction"
    assert tag.is_transient


def test_empty_name_raises_error() -> None:
    with pytest.raises(ValidationError, match="Tag name cannot be empty") as exc_info:
        Tag.create(user_id=UserId(1), name="   ")

    assert exc_info.value.field == "name"


def test_matches_name_is_case_insensitive() -> None:
    tag = Tag.create(user_id=UserId(1), name="Science Fiction")

    assert tag.matches_name("fiction")
    assert not tag.matches_name("fantasy")


def test_create_with_id_trims_stored_name() -> None:
    now = datetime.now(UTC)

    tag = Tag.create_with_id(
        id=TagId(3), user_id=UserId(1), name=" fiction ", created_at=now, updated_at=now
    )

    assert tag.name == "fiction"


def test_too_long_name_raises_error() -> None:
    with pytest.raises(ValidationError, match="cannot exceed 100 characters"):
        Tag.create(user_id=UserId(1), name="x" * 101)


def test_normalize_tag_name() -> None:
    assert normalize_tag_name("  sci-fi\n") == "sci-fi"
