"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .config import settings
from .logging import (
    clear_request_context,
    get_logger,
    set_request_context,
)

logger = get_logger(__name__)

_OPERATION_RE = re.compile(r"\b(query|mutation)\s+(\w+)")


def operation_name_from_document(query: Any) -> str | None:
    """Derive a loggable operation name from a GraphQL document.

    Introspection documents are reported as ``__introspection``; anonymous
    operations as ``unnamed_operation``.
    """
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = _OPERATION_RE.search(query)
    if match:
        kind = "mutation:" if match.group(1) == "mutation" else ""
        return f"{kind}{match.group(2)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(
    request: Request, graphql_path: str | None = None
) -> str | None:
    if request.url.path != (graphql_path or settings.graphql_path):
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if isinstance(op, str) and op:
            return op
        return operation_name_from_document(params.get("query", ""))

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            op = data.get("operationName")
            if isinstance(op, str) and op:
                return op
            return operation_name_from_document(data.get("query", ""))
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    def __init__(self, app: Any, graphql_path: str | None = None) -> None:
        super().__init__(app)
        self.graphql_path = graphql_path or settings.graphql_path

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        graphql_operation = await extract_graphql_operation_name(request, self.graphql_path)
        request_id = set_request_context(operation=graphql_operation)

        try:
            query_params = dict(request.query_params) or None
            # Never log raw GraphQL payloads carried in the query string
            if query_params and request.url.path == self.graphql_path:
                for k in ("query", "variables", "extensions"):
                    if k in query_params:
                        query_params[k] = "[REDACTED]"

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=query_params,
                user_agent=request.headers.get("user-agent"),
                remote_addr=request.client.host if request.client else None,
            )

            response = await call_next(request)

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
            )

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
