from .category_repository import CategoryRepositoryProtocol

__all__ = ["CategoryRepositoryProtocol"]
