"""
Domain layer exceptions.

These exceptions represent domain-level errors raised when an entity or
value object would be left in an invalid state. They carry enough detail
for an outer layer to build a structured response.
"""

from collections.abc import Mapping, Sequence


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class EntityValidationError(DomainError):
    """
    Raised when an entity fails validation.

    Carries every violation found, keyed by field name, so a caller can
    report all problems at once.

    Example:
        EntityValidationError({"name": ["name should not be empty"]})
    """

    def __init__(self, errors: Mapping[str, Sequence[str]]) -> None:
        self.errors: dict[str, list[str]] = {field: list(msgs) for field, msgs in errors.items()}
        super().__init__("Entity Validation Error", {"errors": self.errors})


class InvalidUuidError(DomainError):
    """Raised when a supplied identifier is not a canonical UUID string."""

    def __init__(self) -> None:
        super().__init__("ID must be a valid UUID")


class EntityAlreadyExistsError(DomainError):
    """
    Raised when inserting an entity whose ID is already stored.

    Example: Inserting the same category twice instead of updating it.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} already exists"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id


class EntityNotFoundError(DomainError):
    """
    Raised when an entity cannot be found.

    Example: Updating a category whose ID was never inserted.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, {"entity_type": entity_type, "entity_id": str(entity_id)})
        self.entity_type = entity_type
        self.entity_id = entity_id
