"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from typing import Any

import pytest
from structlog.testing import capture_logs

from catalog.infrastructure.category.repositories import CategoryInMemoryRepository

LogEntries = list[dict[str, Any]]


@pytest.fixture
def log_entries() -> Generator[LogEntries, None, None]:
    """Capture structlog events emitted during the test."""
    with capture_logs() as entries:
        yield entries


@pytest.fixture
def validation_count(log_entries: LogEntries) -> Callable[[str], int]:
    """Return a counter of validation passes recorded for an entity class."""

    def count(entity: str = "Category") -> int:
        return sum(
            1
            for entry in log_entries
            if entry["event"] == "entity_validated" and entry.get("entity") == entity
        )

    return count


@pytest.fixture
def category_repository() -> CategoryInMemoryRepository:
    """Empty in-memory category repository."""
    return CategoryInMemoryRepository()
