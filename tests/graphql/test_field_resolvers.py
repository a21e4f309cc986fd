"""
Unit tests for resolver functions called with a mocked Info object
"""

from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.config import Settings
from bookshelf.graphql.resolvers.book import (
    add_book,
    resolve_author_by_id,
    resolve_books,
    to_book_type,
)
from bookshelf.graphql.resolvers.library import (
    resolve_book_new_author,
    resolve_libraries,
    resolve_library_books,
)
from bookshelf.graphql.types.book import Author, Book
from bookshelf.graphql.types.library import AuthorNew, BookNew, Library
from bookshelf.store import BookRecord


@pytest.fixture
def mock_info(store):
    """Create a mock GraphQL info object carrying the test store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": None, "store": store, "settings": Settings()}
    return info


class TestBookResolvers:
    def test_resolve_books_returns_graphql_types(self, mock_info):
        books = resolve_books(mock_info)

        assert all(isinstance(book, Book) for book in books)
        assert [book.author.name for book in books] == ["Kate Chopin", "Paul Auster"]

    def test_resolve_author_by_id(self, mock_info):
        author = resolve_author_by_id(mock_info, strawberry.ID("1"))

        assert isinstance(author, Author)
        assert author.id == "1"
        assert [b.title for b in author.books] == ["The Awakening"]

    def test_resolve_author_by_id_missing(self, mock_info):
        assert resolve_author_by_id(mock_info, strawberry.ID("42")) is None

    def test_to_book_type_without_author(self):
        book = to_book_type(BookRecord(title="Anonymous", author=None))

        assert book.title == "Anonymous"
        assert book.author is None

    def test_add_book_respects_settings_in_context(self, mock_info, store):
        mock_info.context["settings"] = Settings(persist_mutations=True)

        books = add_book(mock_info, "New Title", "New Author")

        assert books[-1].title == "New Title"
        assert books[-1].author.name == "New Author"
        assert len(store.list_books()) == 3


class TestLibraryResolvers:
    def test_resolve_libraries(self, mock_info):
        libraries = resolve_libraries(mock_info)

        assert [library.branch for library in libraries] == ["downtown", "riverside"]

    def test_resolve_library_books(self, mock_info):
        books = resolve_library_books(Library(branch="riverside"), mock_info)

        assert len(books) == 1
        assert isinstance(books[0], BookNew)
        assert books[0].title == "The Awakening"
        assert books[0].author_name == "Kate Chopin"

    def test_resolve_library_books_unknown_branch(self, mock_info):
        assert resolve_library_books(Library(branch="nowhere"), mock_info) == []

    def test_resolve_book_new_author(self, mock_info):
        author = resolve_book_new_author(
            BookNew(title="City of Glass", author_name="Paul Auster"), mock_info
        )

        assert author == AuthorNew(name="Paul Auster")

    def test_resolve_book_new_author_accepts_empty_name(self, mock_info):
        author = resolve_book_new_author(BookNew(title="Untitled", author_name=""), mock_info)

        assert author.name == ""
