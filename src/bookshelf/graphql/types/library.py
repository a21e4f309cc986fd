"""
Library branch GraphQL type definitions
"""

import strawberry


@strawberry.type
class AuthorNew:
    """Author of a branch book, built from the book's raw author name."""

    name: str


@strawberry.type
class BookNew:
    """Book stocked at a library branch."""

    title: str
    author_name: strawberry.Private[str]

    @strawberry.field
    def author(self, info: strawberry.Info) -> AuthorNew:
        """Get the author of this book."""
        from ..resolvers.library import resolve_book_new_author

        return resolve_book_new_author(self, info)


@strawberry.type
class Library:
    """Library branch type for GraphQL API."""

    branch: str

    @strawberry.field
    def books_new(self, info: strawberry.Info) -> list[BookNew] | None:
        """Get the books stocked at this branch."""
        from ..resolvers.library import resolve_library_books

        return resolve_library_books(self, info)
