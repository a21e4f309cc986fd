"""
Root GraphQL query definitions
"""

import strawberry

from ..types.book import Author, Book
from ..types.library import Library


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def books(self, info: strawberry.Info) -> list[Book | None] | None:
        """Get all books."""
        from ..resolvers.book import resolve_books

        return resolve_books(info)

    @strawberry.field
    def authors(self, info: strawberry.Info) -> list[Author | None] | None:
        """Get all authors."""
        from ..resolvers.book import resolve_authors

        return resolve_authors(info)

    @strawberry.field
    def author(self, info: strawberry.Info, id: strawberry.ID) -> Author | None:
        """Get an author by ID."""
        from ..resolvers.book import resolve_author_by_id

        return resolve_author_by_id(info, id)

    @strawberry.field
    def number_six(self) -> int:
        """Always returns 6."""
        return 6

    @strawberry.field
    def number_seven(self) -> int:
        """Always returns 7."""
        return 7

    @strawberry.field
    def libraries(self, info: strawberry.Info) -> list[Library | None] | None:
        """Get all library branches."""
        from ..resolvers.library import resolve_libraries

        return resolve_libraries(info)
