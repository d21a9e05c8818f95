"""Category module entities."""

from .category import Category

__all__ = ["Category"]
