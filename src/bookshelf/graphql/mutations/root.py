"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.book import Book


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation(name="addBook")
    def add_book(
        self,
        info: strawberry.Info,
        title: str | None = strawberry.UNSET,
        author: str | None = strawberry.UNSET,
    ) -> list[Book | None] | None:
        """Add a book and return the resulting book list."""
        from ..resolvers.book import add_book

        # UNSET keeps the arguments free of a declared default value
        return add_book(
            info,
            None if title is strawberry.UNSET else title,
            None if author is strawberry.UNSET else author,
        )
