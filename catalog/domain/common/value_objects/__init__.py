"""Common value objects shared across all domain modules."""

from .uuid import Uuid, is_valid_uuid

__all__ = [
    "Uuid",
    "is_valid_uuid",
]
