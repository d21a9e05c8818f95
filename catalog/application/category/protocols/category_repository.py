"""Protocol for Category repository."""

from typing import Protocol

from catalog.application.common.repository import RepositoryProtocol
from catalog.domain.category.entities.category import Category
from catalog.domain.common.value_objects import Uuid


class CategoryRepositoryProtocol(RepositoryProtocol[Category, Uuid], Protocol):
    """Protocol for Category repository operations."""
