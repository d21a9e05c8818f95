"""In-memory repository for aggregates."""

from collections.abc import Sequence
from typing import Generic, TypeVar

import structlog

from catalog.domain.common.entity import Entity
from catalog.domain.common.exceptions import EntityAlreadyExistsError, EntityNotFoundError
from catalog.domain.common.value_object import ValueObject

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=Entity)  # type: ignore[type-arg]
EntityIdT = TypeVar("EntityIdT", bound=ValueObject)


class InMemoryRepository(Generic[E, EntityIdT]):
    """
    Dict-backed repository keyed by entity identity.

    Implementation notes:
    - Stores and returns the same instances (no copies)
    - insert() never overwrites; replacing goes through update()
    - find_all() returns entities in insertion order
    - NOT thread-safe; intended for a single event loop
    """

    entity_type: str = "Entity"

    def __init__(self) -> None:
        self.items: dict[EntityIdT, E] = {}

    async def insert(self, entity: E) -> None:
        """
        Store a new entity.

        Raises:
            EntityAlreadyExistsError: If an entity with this ID is stored
        """
        await self.bulk_insert([entity])

    async def bulk_insert(self, entities: Sequence[E]) -> None:
        """
        Store several new entities; none is stored if any ID is taken.

        Raises:
            EntityAlreadyExistsError: If an ID is already stored or repeated
        """
        seen: set[EntityIdT] = set()
        for entity in entities:
            if entity.entity_id in self.items or entity.entity_id in seen:
                raise EntityAlreadyExistsError(self.entity_type, entity.entity_id)
            seen.add(entity.entity_id)

        for entity in entities:
            self.items[entity.entity_id] = entity
            logger.info(
                "entity_inserted", entity=self.entity_type, entity_id=str(entity.entity_id)
            )

    async def update(self, entity: E) -> None:
        """
        Replace a stored entity.

        Raises:
            EntityNotFoundError: If the entity was never inserted
        """
        self._ensure_exists(entity.entity_id)
        self.items[entity.entity_id] = entity
        logger.info("entity_updated", entity=self.entity_type, entity_id=str(entity.entity_id))

    async def delete(self, entity_id: EntityIdT) -> None:
        """
        Remove a stored entity.

        Raises:
            EntityNotFoundError: If no entity has this ID
        """
        self._ensure_exists(entity_id)
        del self.items[entity_id]
        logger.info("entity_deleted", entity=self.entity_type, entity_id=str(entity_id))

    async def find_by_id(self, entity_id: EntityIdT) -> E | None:
        return self.items.get(entity_id)

    async def find_all(self) -> list[E]:
        return list(self.items.values())

    def _ensure_exists(self, entity_id: EntityIdT) -> None:
        if entity_id not in self.items:
            raise EntityNotFoundError(self.entity_type, entity_id)
