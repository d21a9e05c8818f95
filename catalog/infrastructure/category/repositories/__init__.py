from .category_in_memory_repository import CategoryInMemoryRepository

__all__ = ["CategoryInMemoryRepository"]
