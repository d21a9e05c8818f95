"""Category aggregate for organizing catalog items."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar

from catalog.domain.common.entity import Entity
from catalog.domain.common.exceptions import DomainError
from catalog.domain.common.validation import (
    IsBoolean,
    IsOptional,
    IsString,
    MaxLength,
    Required,
    RuleSet,
)
from catalog.domain.common.value_objects import Uuid

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 255


@dataclass(eq=False, kw_only=True)
class Category(Entity[Uuid]):
    """
    Category aggregate root.

    Business Rules:
    - Name is a non-empty string of at most 255 characters
    - Description is optional, at most 255 characters
    - is_active is a boolean
    - category_id is always a Uuid; a string is parsed, other types are rejected
    - Every construction and every rename or description change is validated
    """

    rules: ClassVar[RuleSet] = {
        "name": (Required(), IsString(), MaxLength(NAME_MAX_LENGTH)),
        "description": (IsOptional(), IsString(), MaxLength(DESCRIPTION_MAX_LENGTH)),
        "is_active": (IsBoolean(),),
    }

    # Identity
    category_id: Uuid = field(default_factory=Uuid)

    # Content
    name: str
    description: str | None = None
    is_active: bool = True

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.category_id is None:
            self.category_id = Uuid()
        elif isinstance(self.category_id, str):
            self.category_id = Uuid(self.category_id)
        elif not isinstance(self.category_id, Uuid):
            raise DomainError(
                f"category_id must be a Uuid, got {type(self.category_id).__name__}"
            )
        self.validate(self)

    @property
    def entity_id(self) -> Uuid:
        return self.category_id

    # Commands
    def change_name(self, name: str) -> None:
        """
        Rename the category.

        Raises:
            EntityValidationError: If the new name breaks an invariant;
                the category keeps its previous name
        """
        self._apply_changes(name=name)

    def change_description(self, description: str | None) -> None:
        """
        Replace the description; None clears it.

        Raises:
            EntityValidationError: If the new description breaks an invariant
        """
        self._apply_changes(description=description)

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    # Factory methods
    @classmethod
    def create(
        cls,
        name: str,
        description: str | None = None,
        is_active: bool = True,
    ) -> "Category":
        """Factory for creating a new category with a fresh ID."""
        return cls(
            category_id=Uuid(),
            name=name,
            description=description,
            is_active=is_active,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        category_id: Uuid,
        name: str,
        description: str | None,
        is_active: bool,
        created_at: datetime,
    ) -> "Category":
        """Factory for reconstituting a category from persistence."""
        return cls(
            category_id=category_id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
        )
