"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import Settings, settings
from ..logging import get_logger
from ..store import CatalogStore
from .context import build_context
from .mutations.root import Mutation
from .queries.root import Query
from .types.book import BookTitle

logger = get_logger(__name__)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema fails its startup self-check."""


# Create the GraphQL schema
schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    # Registered explicitly so the type stays declared even if no field returns it
    types=[BookTitle],
)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Runs graphql-core's structural validation and an introspection round trip
    so a broken schema stops the server from starting.

    Raises:
        SchemaValidationError: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def create_graphql_router(
    store: CatalogStore, app_settings: Settings | None = None
) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI serving ``store``."""
    app_settings = app_settings or settings

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return build_context(store, app_settings, request=request)

    return GraphQLRouter(
        schema,
        path=app_settings.graphql_path,
        graphql_ide="graphiql" if app_settings.graphiql else None,
        context_getter=get_context,
    )
