"""
Book and author GraphQL type definitions
"""

import strawberry


@strawberry.type(name="Books")
class BookTitle:
    """Title-only book entry listed under an author."""

    title: str | None


@strawberry.type
class Author:
    """Author type for GraphQL API."""

    id: strawberry.ID
    name: str | None
    books: list[BookTitle | None] | None


@strawberry.type
class Book:
    """Book type for GraphQL API."""

    title: str | None
    author: Author | None
