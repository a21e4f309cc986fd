"""
GraphQL request context helpers
"""

from typing import Any

import strawberry

from ..config import Settings, settings
from ..store import CatalogStore


def build_context(
    store: CatalogStore, app_settings: Settings | None = None, request: Any = None
) -> dict[str, Any]:
    """Build the context dict handed to every resolver of one operation."""
    return {
        "request": request,
        "store": store,
        "settings": app_settings or settings,
    }


def get_store_from_info(info: strawberry.Info) -> CatalogStore:
    """Return the catalog store carried by the GraphQL context."""
    return info.context["store"]


def get_settings_from_info(info: strawberry.Info) -> Settings:
    """Return the settings carried by the GraphQL context, or the global settings."""
    return info.context.get("settings") or settings
