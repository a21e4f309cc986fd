"""
Main FastAPI application for the Bookshelf GraphQL service
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, get_server_url, settings
from ..logging import configure_logging, get_logger
from ..middleware import LoggingContextMiddleware
from ..store import CatalogStore, create_seeded_store

# Configure logging before creating logger
configure_logging(debug=settings.debug)
logger = get_logger(__name__)


def create_app(store: CatalogStore | None = None, app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Catalog store to serve; a freshly seeded one when omitted
        app_settings: Settings override, mainly for tests
    """
    app_settings = app_settings or settings
    if store is None:
        store = create_seeded_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(
            "Starting Bookshelf API...",
            environment=app_settings.environment,
            persist_mutations=app_settings.persist_mutations,
        )
        url = get_server_url(
            app_settings.api_host, app_settings.api_port, app_settings.graphql_path
        )
        logger.info(f"🚀  Server ready at: {url}", url=url)

        yield

        logger.info("Shutting down Bookshelf API...")

    app = FastAPI(
        title="Bookshelf API",
        description="GraphQL endpoint over an in-memory book catalog",
        version=__version__,
        lifespan=lifespan,
        debug=app_settings.debug,
    )
    app.state.store = store

    app.add_middleware(LoggingContextMiddleware, graphql_path=app_settings.graphql_path)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health_check():  # pyright: ignore [reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    try:
        from ..graphql.schema import create_graphql_router, validate_schema

        # Fail fast: the server should not start with a broken schema
        logger.info("Validating GraphQL schema...")
        validate_schema()

        graphql_router = create_graphql_router(store, app_settings)
        app.include_router(graphql_router, prefix="")
        logger.info("GraphQL endpoint initialized successfully", endpoint=app_settings.graphql_path)
    except Exception as e:  # pragma: no cover
        logger.error("Failed to initialize GraphQL endpoint", error=str(e))
        raise

    return app


# Create the main application instance
app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookshelf.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower(),
    )
