"""In-memory repository for Category aggregates."""

from catalog.domain.category.entities.category import Category
from catalog.domain.common.value_objects import Uuid
from catalog.infrastructure.common.repositories.in_memory_repository import InMemoryRepository


class CategoryInMemoryRepository(InMemoryRepository[Category, Uuid]):
    """Category repository backed by a dict; satisfies CategoryRepositoryProtocol."""

    entity_type = "Category"
