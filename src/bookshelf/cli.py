#!/usr/bin/env python3
"""
Main CLI entry point for the Bookshelf GraphQL server.
"""

import os
import sys

import click
import uvicorn

from bookshelf import __version__
from bookshelf.config import settings
from bookshelf.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="bookshelf")
def cli() -> None:
    """Bookshelf CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=settings.api_host,
    show_default=True,
    help="Host to bind to",
)
@click.option(
    "--port",
    default=settings.api_port,
    show_default=True,
    type=int,
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)
@click.option(
    "--persist-mutations",
    is_flag=True,
    default=False,
    help="Store books added through addBook instead of only returning them",
)
def serve(
    host: str,
    port: int,
    reload: bool,
    log_level: str,
    persist_mutations: bool,
) -> None:
    """Start the Bookshelf GraphQL server."""
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting Bookshelf API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
        persist_mutations=persist_mutations,
    )

    # Exported for the reloader process, which builds its own settings
    os.environ["BOOKSHELF_API_HOST"] = host
    os.environ["BOOKSHELF_API_PORT"] = str(port)
    os.environ["BOOKSHELF_LOG_LEVEL"] = log_level
    os.environ["BOOKSHELF_DEBUG"] = "true" if log_level == "debug" else "false"
    if persist_mutations:
        os.environ["BOOKSHELF_PERSIST_MUTATIONS"] = "true"

    try:
        if reload:
            # The reloader imports the app in a fresh process that reads the environment
            uvicorn.run(
                "bookshelf.api.app:app",
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
        else:
            from bookshelf.api.app import create_app

            app_settings = settings.model_copy(
                update={
                    "api_host": host,
                    "api_port": port,
                    "log_level": log_level,
                    "debug": log_level == "debug",
                    "persist_mutations": persist_mutations or settings.persist_mutations,
                }
            )
            uvicorn.run(
                create_app(app_settings=app_settings),
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from bookshelf.graphql.schema import schema as graphql_schema

    click.echo(graphql_schema.as_str())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
