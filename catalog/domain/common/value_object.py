"""
Base class for Value Objects.

Value Objects are immutable objects that are defined by their attributes
rather than by identity. Two value objects are equal if all their
attributes are equal.

Example:
    @dataclass(frozen=True)
    class Slug(ValueObject):
        value: str

        def __post_init__(self) -> None:
            if " " in self.value:
                raise DomainError("Slug cannot contain spaces")
"""


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (use frozen=True in dataclass)
    - Compared by value (all attributes must match)
    - Self-validating (validation in __post_init__)

    Subclasses should be decorated with @dataclass(frozen=True)
    and implement validation in __post_init__.
    """

    def __str__(self) -> str:
        return str(self.to_primitive())

    def to_primitive(self) -> object:
        """
        Convert to primitive Python type for serialization.

        Returns the attribute value for single-value VOs,
        a dict of attributes otherwise.
        """
        values = list(self.__dict__.values())
        if len(values) == 1:
            return values[0]
        return dict(self.__dict__)
