"""
Configuration management for the Bookshelf GraphQL service
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # When False, addBook returns the extended list without storing the new book
    persist_mutations: bool = False

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "BOOKSHELF_"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_server_url(
    host: str | None = None, port: int | None = None, path: str | None = None
) -> str:
    """Build the URL clients use to reach the GraphQL endpoint."""
    host = host if host is not None else settings.api_host
    port = port if port is not None else settings.api_port
    path = path if path is not None else settings.graphql_path
    # 0.0.0.0 binds every interface but is not a reachable address
    if host in ("0.0.0.0", "::"):
        host = "localhost"
    return f"http://{host}:{port}{path}"
