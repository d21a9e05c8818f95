"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Entities validate themselves: each subclass declares a rule-set, and every
construction and state change runs exactly one validation pass over it.

Example:
    @dataclass(eq=False, kw_only=True)
    class Genre(Entity[Uuid]):
        rules: ClassVar[RuleSet] = {"name": (Required(), IsString(), MaxLength(255))}

        genre_id: Uuid = field(default_factory=Uuid)
        name: str

        def __post_init__(self) -> None:
            self.validate(self)

        @property
        def entity_id(self) -> Uuid:
            return self.genre_id

        def change_name(self, name: str) -> None:
            self._apply_changes(name=name)
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import fields
from typing import Any, ClassVar, Generic, TypeVar

import structlog

from .exceptions import EntityValidationError
from .validation import Invalid, RuleSet, validate
from .value_object import ValueObject

logger = structlog.get_logger(__name__)

IdType = TypeVar("IdType", bound=ValueObject)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Never observable in an invalid state

    Subclasses must be dataclasses declared with eq=False so the
    identity-based equality below is kept.
    """

    rules: ClassVar[RuleSet] = {}

    @property
    @abstractmethod
    def entity_id(self) -> IdType:
        """Return the identity of this entity."""

    @classmethod
    def validate_fields(cls, values: Mapping[str, object]) -> None:
        """
        Run one validation pass over field values.

        Each pass emits an ``entity_validated`` event.

        Raises:
            EntityValidationError: With every violation found
        """
        result = validate(cls.rules, values)
        logger.debug("entity_validated", entity=cls.__name__, valid=result.is_valid)
        if isinstance(result, Invalid):
            raise EntityValidationError(result.errors)

    @classmethod
    def validate(cls, entity: "Entity[Any]") -> None:
        """Validate the current state of an entity against this class's rules."""
        cls.validate_fields(entity.to_fields())

    def to_fields(self) -> dict[str, object]:
        """Return the current value of every dataclass field."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    def _apply_changes(self, **changes: object) -> None:
        """
        Validate the state these changes would produce, then apply them.

        Nothing is assigned when validation fails.
        """
        self.validate_fields({**self.to_fields(), **changes})
        for name, value in changes.items():
            setattr(self, name, value)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return self.entity_id == other.entity_id

    def __hash__(self) -> int:
        return hash(self.entity_id)
