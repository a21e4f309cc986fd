"""
In-memory catalog store backing the GraphQL resolvers
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthorName:
    """Author embedded in a book record."""

    name: str | None


@dataclass(frozen=True)
class BookRecord:
    title: str | None
    author: AuthorName | None


@dataclass(frozen=True)
class TitleRecord:
    """Title-only snapshot of a book, as listed under an author."""

    title: str | None


@dataclass(frozen=True)
class AuthorRecord:
    id: str
    name: str | None
    books: tuple[TitleRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LibraryRecord:
    branch: str


@dataclass(frozen=True)
class BranchBookRecord:
    """A book held by a library branch; author is the raw name."""

    title: str
    author: str
    branch: str


class CatalogStore:
    """Holds the book, author, library and branch-book collections.

    Readers get a snapshot list, so a concurrent append never changes a
    result that is already being resolved. Writes go through ``_write_lock``.
    """

    def __init__(
        self,
        books: Iterable[BookRecord] = (),
        authors: Iterable[AuthorRecord] = (),
        libraries: Iterable[LibraryRecord] = (),
        branch_books: Iterable[BranchBookRecord] = (),
    ) -> None:
        self._books: tuple[BookRecord, ...] = tuple(books)
        self._authors: tuple[AuthorRecord, ...] = tuple(authors)
        self._libraries: tuple[LibraryRecord, ...] = tuple(libraries)
        self._branch_books: tuple[BranchBookRecord, ...] = tuple(branch_books)
        self._write_lock = threading.Lock()

    def list_books(self) -> list[BookRecord]:
        return list(self._books)

    def list_authors(self) -> list[AuthorRecord]:
        return list(self._authors)

    def get_author(self, author_id: str) -> AuthorRecord | None:
        """Return the first author with a matching id, or None."""
        for author in self._authors:
            if author.id == author_id:
                return author
        return None

    def list_libraries(self) -> list[LibraryRecord]:
        return list(self._libraries)

    def books_at_branch(self, branch: str) -> list[BranchBookRecord]:
        """Return the books stocked at ``branch`` in collection order."""
        return [book for book in self._branch_books if book.branch == branch]

    def with_book(self, book: BookRecord) -> list[BookRecord]:
        """Return the books collection with ``book`` appended, leaving the store unchanged."""
        return [*self._books, book]

    def add_book(self, book: BookRecord) -> list[BookRecord]:
        """Append ``book`` to the books collection and return the new collection."""
        with self._write_lock:
            self._books = (*self._books, book)
            books = list(self._books)
        logger.info("Book added", title=book.title, total_books=len(books))
        return books
