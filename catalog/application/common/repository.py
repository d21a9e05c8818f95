"""
Generic repository protocol.

Describes how aggregates are persisted without tying the domain to a store.
Concrete adapters (database, in-memory) satisfy it structurally.

Example:
    class GenreRepositoryProtocol(RepositoryProtocol[Genre, Uuid], Protocol):
        pass
"""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from catalog.domain.common.entity import Entity
from catalog.domain.common.value_object import ValueObject

E = TypeVar("E", bound=Entity)  # type: ignore[type-arg]
EntityIdT = TypeVar("EntityIdT", bound=ValueObject, contravariant=True)


class RepositoryProtocol(Protocol[E, EntityIdT]):
    """
    Protocol for aggregate persistence.

    All operations are coroutines since implementations usually wait on an
    external store. Errors raised by the store are implementation-specific.
    Ordering and atomicity of bulk_insert belong to the implementation.
    """

    async def insert(self, entity: E) -> None:
        """
        Persist a new entity.

        Args:
            entity: The entity to store
        """
        ...

    async def bulk_insert(self, entities: Sequence[E]) -> None:
        """
        Persist several new entities.

        Args:
            entities: The entities to store
        """
        ...

    async def update(self, entity: E) -> None:
        """
        Replace the stored state of an existing entity.

        Args:
            entity: The entity with its new state
        """
        ...

    async def delete(self, entity_id: EntityIdT) -> None:
        """
        Remove an entity.

        Args:
            entity_id: Identity of the entity to remove
        """
        ...

    async def find_by_id(self, entity_id: EntityIdT) -> E | None:
        """
        Find an entity by identity.

        Args:
            entity_id: Identity to look up

        Returns:
            The entity if found, None otherwise
        """
        ...

    async def find_all(self) -> list[E]:
        """
        Get every stored entity.

        Returns:
            List of entities
        """
        ...
