"""
In-memory catalog storage
"""

from .catalog import (
    AuthorName,
    AuthorRecord,
    BookRecord,
    BranchBookRecord,
    CatalogStore,
    LibraryRecord,
    TitleRecord,
)
from .seed_data import create_seeded_store

__all__ = [
    "AuthorName",
    "AuthorRecord",
    "BookRecord",
    "BranchBookRecord",
    "CatalogStore",
    "LibraryRecord",
    "TitleRecord",
    "create_seeded_store",
]
