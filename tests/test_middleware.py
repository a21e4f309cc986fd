"""
Tests for request logging middleware helpers
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from bookshelf.api.app import create_app
from bookshelf.config import Settings
from bookshelf.middleware import operation_name_from_document


@pytest.mark.parametrize(
    "document,expected",
    [
        ("query AuthorById($id: ID!) { author(id: $id) { name } }", "AuthorById"),
        ('mutation AddBook { addBook(title: "x") { title } }', "mutation:AddBook"),
        ("{ numberSix }", "unnamed_operation"),
        ("query IntrospectionQuery { __schema { types { name } } }", "__introspection"),
        ("", None),
        (None, None),
    ],
)
def test_operation_name_from_document(document, expected):
    assert operation_name_from_document(document) == expected


def test_request_id_header_is_unique_per_request(store, app_settings):
    with TestClient(create_app(store=store, app_settings=app_settings)) as client:
        first = client.post("/graphql", json={"query": "query Six { numberSix }"})
        second = client.get("/health")

    assert first.headers["x-request-id"]
    assert second.headers["x-request-id"]
    assert first.headers["x-request-id"] != second.headers["x-request-id"]


def test_non_json_body_still_reaches_graphql(store, app_settings):
    with TestClient(create_app(store=store, app_settings=app_settings)) as client:
        resp = client.post(
            "/graphql",
            content=b"not json",
            headers={"content-type": "application/json"},
        )

    assert resp.status_code == 400


def test_custom_graphql_path_is_redacted_and_named(store):
    app = create_app(store=store, app_settings=Settings(graphql_path="/api/graphql"))

    with patch("bookshelf.middleware.logger") as mock_logger:
        with TestClient(app) as client:
            resp = client.get(
                "/api/graphql", params={"query": "query Secret { secretField: numberSix }"}
            )

    assert resp.json() == {"data": {"secretField": 6}}
    started = next(
        call for call in mock_logger.info.call_args_list if call.args[0] == "Request started"
    )
    assert started.kwargs["query_params"] == {"query": "[REDACTED]"}
    assert started.kwargs["path"] == "/api/graphql"


def test_operation_name_uses_middleware_path(store):
    app = create_app(store=store, app_settings=Settings(graphql_path="/api/graphql"))

    with patch("bookshelf.middleware.set_request_context", return_value="req-1") as mock_set:
        with TestClient(app) as client:
            client.post("/api/graphql", json={"query": "query Seven { numberSeven }"})

    assert mock_set.call_args.kwargs["operation"] == "Seven"
