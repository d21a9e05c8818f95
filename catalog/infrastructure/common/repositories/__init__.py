from .in_memory_repository import InMemoryRepository

__all__ = ["InMemoryRepository"]
