"""
Seed data for the in-memory catalog.

Every call builds a fresh store, so each application instance (and each test)
starts from the same collections without sharing state.
"""

from __future__ import annotations

from ..logging import get_logger
from .catalog import (
    AuthorName,
    AuthorRecord,
    BookRecord,
    BranchBookRecord,
    CatalogStore,
    LibraryRecord,
    TitleRecord,
)

logger = get_logger(__name__)


def seed_books() -> list[BookRecord]:
    return [
        BookRecord(title="The Awakening", author=AuthorName(name="Kate Chopin")),
        BookRecord(title="City of Glass", author=AuthorName(name="Paul Auster")),
    ]


def seed_authors() -> list[AuthorRecord]:
    return [
        AuthorRecord(
            id="1",
            name="Kate Chopin",
            books=(TitleRecord(title="The Awakening"),),
        ),
        AuthorRecord(
            id="2",
            name="Paul Auster",
            books=(TitleRecord(title="City of Glass"),),
        ),
    ]


def seed_libraries() -> list[LibraryRecord]:
    return [
        LibraryRecord(branch="downtown"),
        LibraryRecord(branch="riverside"),
    ]


def seed_branch_books() -> list[BranchBookRecord]:
    # The branch field says which library has the book in stock
    return [
        BranchBookRecord(title="The Awakening", author="Kate Chopin", branch="riverside"),
        BranchBookRecord(title="City of Glass", author="Paul Auster", branch="downtown"),
    ]


def create_seeded_store() -> CatalogStore:
    """Build a catalog store populated with the initial collections."""
    store = CatalogStore(
        books=seed_books(),
        authors=seed_authors(),
        libraries=seed_libraries(),
        branch_books=seed_branch_books(),
    )
    logger.debug(
        "Catalog store seeded",
        books=len(store.list_books()),
        authors=len(store.list_authors()),
        libraries=len(store.list_libraries()),
    )
    return store
