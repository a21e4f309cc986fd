"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bookshelf.config import Settings
from bookshelf.graphql.context import build_context
from bookshelf.store import CatalogStore, create_seeded_store


@pytest.fixture
def store() -> CatalogStore:
    """Provide a freshly seeded catalog store."""
    return create_seeded_store()


@pytest.fixture
def app_settings() -> Settings:
    """Settings with the default, non-persisting addBook behavior."""
    return Settings(persist_mutations=False, debug=True)


@pytest.fixture
def persisting_settings() -> Settings:
    """Settings under which addBook stores the new book."""
    return Settings(persist_mutations=True, debug=True)


@pytest.fixture
def execute(store: CatalogStore, app_settings: Settings) -> Callable[..., Any]:
    """Execute a GraphQL document against the schema with the test store."""
    from bookshelf.graphql.schema import schema

    def _execute(query: str, variables: dict[str, Any] | None = None, **overrides: Any) -> Any:
        context = build_context(
            overrides.get("store", store), overrides.get("settings", app_settings)
        )
        return schema.execute_sync(query, variable_values=variables, context_value=context)

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
