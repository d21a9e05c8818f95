"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Self-validating objects with identity and lifecycle
- Validation rules and the validate() engine
"""

from .entity import Entity
from .exceptions import (
    DomainError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    EntityValidationError,
    InvalidUuidError,
)
from .validation import (
    Invalid,
    IsBoolean,
    IsOptional,
    IsString,
    MaxLength,
    Required,
    Rule,
    RuleSet,
    Valid,
    ValidationResult,
    validate,
)
from .value_object import ValueObject

__all__ = [
    "DomainError",
    "Entity",
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    "EntityValidationError",
    "Invalid",
    "InvalidUuidError",
    "IsBoolean",
    "IsOptional",
    "IsString",
    "MaxLength",
    "Required",
    "Rule",
    "RuleSet",
    "Valid",
    "ValidationResult",
    "ValueObject",
    "validate",
]
