import re
from dataclasses import dataclass
from uuid import uuid4

from ..exceptions import InvalidUuidError
from ..value_object import ValueObject

# Versions 1-5 with the RFC 4122 variant, or the nil UUID.
UUID_PATTERN = re.compile(
    r"^(?:[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
    r"|00000000-0000-0000-0000-000000000000)$",
    re.IGNORECASE,
)


def is_valid_uuid(value: object) -> bool:
    """Check that value is a UUID string in canonical hyphenated form."""
    return isinstance(value, str) and UUID_PATTERN.match(value) is not None


@dataclass(frozen=True)
class Uuid(ValueObject):
    """
    Globally unique identifier value object.

    Omitting ``id`` generates a fresh random UUID, which is trusted as is.
    A caller-supplied ``id`` is checked once, here, and never again.
    """

    id: str | None = None

    def __post_init__(self) -> None:
        if self.id is None:
            object.__setattr__(self, "id", str(uuid4()))
        elif not is_valid_uuid(self.id):
            raise InvalidUuidError()
