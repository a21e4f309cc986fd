from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ..types.library import AuthorNew, BookNew, Library

logger = get_logger(__name__)


# Query resolvers
def resolve_libraries(info: strawberry.Info) -> list[Library]:
    """Resolve the library branches in collection order."""
    from ..types.library import Library as LibraryType

    store = get_store_from_info(info)
    return [LibraryType(branch=library.branch) for library in store.list_libraries()]


# Field resolvers
def resolve_library_books(library: Library, info: strawberry.Info) -> list[BookNew]:
    """Resolve the books stocked at a library's branch; empty when it holds none."""
    from ..types.library import BookNew as BookNewType

    store = get_store_from_info(info)
    books = store.books_at_branch(library.branch)
    logger.debug("Resolved branch books", branch=library.branch, count=len(books))
    return [BookNewType(title=book.title, author_name=book.author) for book in books]


def resolve_book_new_author(book: BookNew, info: strawberry.Info) -> AuthorNew:
    """Wrap a branch book's raw author name in an author object."""
    from ..types.library import AuthorNew as AuthorNewType

    _ = info
    return AuthorNewType(name=book.author_name)
