"""
Field-level validation for domain entities.

A rule-set maps each field name to an ordered sequence of rules. Validating
a mapping of field values evaluates every rule of every declared field and
collects all violations instead of stopping at the first one.

Example:
    rules: RuleSet = {
        "name": (Required(), IsString(), MaxLength(255)),
        "description": (IsOptional(), IsString(), MaxLength(255)),
    }

    result = validate(rules, {"name": "", "description": None})
    if not result.is_valid:
        print(result.errors)  # {"name": ["name should not be empty"]}
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import ClassVar


class Rule(ABC):
    """A single check with a fixed message template."""

    template: ClassVar[str]

    @abstractmethod
    def is_satisfied(self, value: object) -> bool:
        """Return True if value passes this rule."""

    def message(self, field_name: str) -> str:
        return self.template.format(field=field_name)


@dataclass(frozen=True)
class Required(Rule):
    """Value must be present and not an empty string."""

    template: ClassVar[str] = "{field} should not be empty"

    def is_satisfied(self, value: object) -> bool:
        return value is not None and value != ""


@dataclass(frozen=True)
class IsString(Rule):
    template: ClassVar[str] = "{field} must be a string"

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, str)


@dataclass(frozen=True)
class IsBoolean(Rule):
    template: ClassVar[str] = "{field} must be a boolean value"

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, bool)


@dataclass(frozen=True)
class MaxLength(Rule):
    """
    Value must be a string no longer than ``max_length``.

    Non-string values always fail, independently of IsString.
    """

    max_length: int
    template: ClassVar[str] = "{field} must be shorter than or equal to {max_length} characters"

    def is_satisfied(self, value: object) -> bool:
        return isinstance(value, str) and len(value) <= self.max_length

    def message(self, field_name: str) -> str:
        return self.template.format(field=field_name, max_length=self.max_length)


@dataclass(frozen=True)
class IsOptional(Rule):
    """Marker: a None value skips the remaining rules of its field."""

    template: ClassVar[str] = ""

    def is_satisfied(self, value: object) -> bool:
        return True


RuleSet = Mapping[str, Sequence[Rule]]


@dataclass(frozen=True)
class Valid:
    """Outcome of a validation pass with no violations."""

    @property
    def is_valid(self) -> bool:
        return True

    @property
    def errors(self) -> dict[str, list[str]]:
        return {}


@dataclass(frozen=True)
class Invalid:
    """Outcome of a validation pass with at least one violation."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return False


ValidationResult = Valid | Invalid


def validate(rules: RuleSet, values: Mapping[str, object]) -> ValidationResult:
    """
    Validate field values against a rule-set.

    Args:
        rules: Field name to ordered rules
        values: Field name to current value; missing fields count as None

    Returns:
        Valid, or Invalid with messages per field in declaration order
    """
    errors: dict[str, list[str]] = {}

    for field_name, field_rules in rules.items():
        value = values.get(field_name)
        if value is None and any(isinstance(rule, IsOptional) for rule in field_rules):
            continue

        for rule in field_rules:
            if not rule.is_satisfied(value):
                errors.setdefault(field_name, []).append(rule.message(field_name))

    if errors:
        return Invalid(errors)
    return Valid()
