from __future__ import annotations

import contextlib
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from graphql import GraphQLSchema, build_schema

from gqltransport.core.app.application_factory import build_app
from gqltransport.core.config.app_config import AppConfig
from gqltransport.core.domain.outcomes import GraphQLResponse, OperationContext
from gqltransport.core.interfaces.executable_schema_interface import (
    IExecutableSchema,
)

USER_SCHEMA_SDL = """
    schema { query: Query }
    type Query {
        me: User!
        user(id: Int): User!
    }
    type User { name: String! }
"""


class StubExecutableSchema(IExecutableSchema):
    """Executable schema whose handlers return canned responses.

    Queries always answer ``{"name":"test"}`` and mutations are rejected,
    unless a test swaps the handler responses.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        query_response: GraphQLResponse | None = None,
        mutation_response: GraphQLResponse | None = None,
    ) -> None:
        self._schema = schema
        self.query_response = query_response or GraphQLResponse(
            data=b'{"name":"test"}'
        )
        self.mutation_response = mutation_response or GraphQLResponse.error_response(
            "mutations are not supported"
        )
        self.query_calls: list[OperationContext] = []
        self.mutation_calls: list[OperationContext] = []

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    def query(self, context: OperationContext) -> GraphQLResponse:
        self.query_calls.append(context)
        return self.query_response

    def mutation(self, context: OperationContext) -> GraphQLResponse:
        self.mutation_calls.append(context)
        return self.mutation_response


@pytest.fixture
def user_schema() -> GraphQLSchema:
    return build_schema(USER_SCHEMA_SDL)


@pytest.fixture
def stub_schema(user_schema: GraphQLSchema) -> StubExecutableSchema:
    return StubExecutableSchema(user_schema)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def client(
    stub_schema: StubExecutableSchema, app_config: AppConfig
) -> Iterator[TestClient]:
    """A TestClient serving the stub schema at ``/graphql``."""
    client = TestClient(build_app(stub_schema, app_config))
    try:
        yield client
    finally:
        with contextlib.suppress(Exception):
            client.close()


def do_request(
    client: TestClient,
    body: str,
    content_type: str = "application/json",
    method: str = "POST",
    path: str = "/graphql",
):  # type: ignore[no-untyped-def]
    """Send ``body`` with the given content type; an empty type sends no header."""
    headers = {"Content-Type": content_type} if content_type else {}
    return client.request(method, path, content=body, headers=headers)
