"""Tests for the Entity base class."""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from catalog.domain.common.entity import Entity
from catalog.domain.common.exceptions import EntityValidationError
from catalog.domain.common.validation import IsString, MaxLength, Required, RuleSet
from catalog.domain.common.value_objects import Uuid


@dataclass(eq=False, kw_only=True)
class Genre(Entity[Uuid]):
    rules: ClassVar[RuleSet] = {"name": (Required(), IsString(), MaxLength(10))}

    genre_id: Uuid = field(default_factory=Uuid)
    name: str

    def __post_init__(self) -> None:
        self.validate(self)

    @property
    def entity_id(self) -> Uuid:
        return self.genre_id

    def rename(self, name: str) -> None:
        self._apply_changes(name=name)


@dataclass(eq=False, kw_only=True)
class Tag(Genre):
    pass


class TestEntityIdentity:
    """Test suite for identity-based equality."""

    def test_same_id_different_fields_are_equal(self) -> None:
        genre_id = Uuid()
        assert Genre(genre_id=genre_id, name="Drama") == Genre(genre_id=genre_id, name="Comedy")

    def test_different_ids_are_not_equal(self) -> None:
        assert Genre(name="Drama") != Genre(name="Drama")

    def test_different_types_with_same_id_are_not_equal(self) -> None:
        genre_id = Uuid()
        assert Genre(genre_id=genre_id, name="Drama") != Tag(genre_id=genre_id, name="Drama")

    def test_hash_follows_identity(self) -> None:
        genre_id = Uuid()
        genres = {Genre(genre_id=genre_id, name="Drama"), Genre(genre_id=genre_id, name="Crime")}
        assert len(genres) == 1

    def test_to_fields(self) -> None:
        genre = Genre(name="Drama")
        assert genre.to_fields() == {"genre_id": genre.genre_id, "name": "Drama"}


class TestEntityValidation:
    """Test suite for self-validation."""

    def test_construction_runs_one_pass(self, validation_count: Callable[[str], int]) -> None:
        Genre(name="Drama")
        assert validation_count("Genre") == 1

    def test_invalid_construction_raises(self) -> None:
        with pytest.raises(EntityValidationError) as exc_info:
            Genre(name="")
        assert exc_info.value.errors == {"name": ["name should not be empty"]}

    def test_validate_fields_accepts_plain_mapping(self) -> None:
        Genre.validate_fields({"name": "Drama"})

    def test_apply_changes_assigns_valid_values(
        self, validation_count: Callable[[str], int]
    ) -> None:
        genre = Genre(name="Drama")
        genre.rename("Crime")
        assert genre.name == "Crime"
        assert validation_count("Genre") == 2

    def test_apply_changes_leaves_entity_untouched_on_failure(self) -> None:
        genre = Genre(name="Drama")
        with pytest.raises(EntityValidationError):
            genre.rename("a" * 11)
        assert genre.name == "Drama"

    def test_validation_event_reports_outcome(self, log_entries: list[dict[str, object]]) -> None:
        genre = Genre(name="Drama")
        with pytest.raises(EntityValidationError):
            genre.rename("")

        outcomes = [entry["valid"] for entry in log_entries if entry["event"] == "entity_validated"]
        assert outcomes == [True, False]
