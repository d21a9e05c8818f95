"""
Application common module.

Contains contracts shared by every bounded context:
- RepositoryProtocol: Persistence port for aggregates
"""

from .repository import RepositoryProtocol

__all__ = ["RepositoryProtocol"]
