from __future__ import annotations

import strawberry

from ...logging import get_logger
from ...store import AuthorName, AuthorRecord, BookRecord
from ..context import get_settings_from_info, get_store_from_info
from ..types.book import Author, Book, BookTitle

logger = get_logger(__name__)


def to_author_type(record: AuthorRecord) -> Author:
    return Author(
        id=strawberry.ID(record.id),
        name=record.name,
        books=[BookTitle(title=book.title) for book in record.books],
    )


def to_book_type(record: BookRecord) -> Book:
    author = None
    if record.author is not None:
        # Embedded authors carry a name only; selecting their id is a non-null error
        author = Author(id=None, name=record.author.name, books=None)  # type: ignore[arg-type]
    return Book(title=record.title, author=author)


# Query resolvers
def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve the current books collection."""
    store = get_store_from_info(info)
    return [to_book_type(book) for book in store.list_books()]


def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve the authors collection."""
    store = get_store_from_info(info)
    return [to_author_type(author) for author in store.list_authors()]


def resolve_author_by_id(info: strawberry.Info, id: str) -> Author | None:
    """
    Resolve an author by id.

    A missing author resolves to null rather than an error.
    """
    store = get_store_from_info(info)
    author = store.get_author(str(id))
    if author is None:
        logger.info("Author not found", author_id=str(id))
        return None
    return to_author_type(author)


# Mutation resolvers
def add_book(info: strawberry.Info, title: str | None, author: str | None) -> list[Book]:
    """
    Add a book and return the resulting books collection.

    Unless ``persist_mutations`` is enabled the new book only appears in this
    response; the stored collection is left unchanged.
    """
    store = get_store_from_info(info)
    record = BookRecord(title=title, author=AuthorName(name=author))

    if get_settings_from_info(info).persist_mutations:
        books = store.add_book(record)
    else:
        books = store.with_book(record)
        logger.info("Book not persisted", title=title, persist_mutations=False)

    return [to_book_type(book) for book in books]
