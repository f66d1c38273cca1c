"""
Executable schema backed by graphql-core.

Provides the default query and mutation handlers: the selected operation is
executed synchronously against a root value and the result is serialized to
compact JSON for the response encoder.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_schema,
    execute_sync,
    validate_schema,
)

from gqltransport.core.common.exceptions import SchemaLoadError
from gqltransport.core.constants import (
    SCHEMA_FILE_NOT_FOUND_ERROR,
    SCHEMA_INVALID_ERROR,
)
from gqltransport.core.domain.outcomes import GraphQLResponse, OperationContext
from gqltransport.core.interfaces.executable_schema_interface import (
    IExecutableSchema,
)
from gqltransport.core.services.error_conversion import error_item_from_graphql_error
from gqltransport.core.services.response_encoder import dump_json

logger = logging.getLogger(__name__)


class GraphQLCoreExecutableSchema(IExecutableSchema):
    """Executes operations with ``graphql.execute_sync``.

    The schema is validated once on construction so that request handling
    never has to deal with an invalid schema.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        root_value: Any = None,
        context_value: Any = None,
    ) -> None:
        schema_errors = validate_schema(schema)
        if schema_errors:
            raise SchemaLoadError(
                SCHEMA_INVALID_ERROR.format(
                    error="; ".join(error.message for error in schema_errors)
                )
            )
        self._schema = schema
        self._root_value = root_value
        self._context_value = context_value

    @classmethod
    def from_sdl(
        cls, sdl: str, root_value: Any = None, context_value: Any = None
    ) -> GraphQLCoreExecutableSchema:
        """Build an executable schema from SDL text."""
        try:
            schema = build_schema(sdl)
        except (GraphQLError, TypeError) as exc:
            raise SchemaLoadError(SCHEMA_INVALID_ERROR.format(error=exc)) from exc
        return cls(schema, root_value=root_value, context_value=context_value)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        root_value: Any = None,
        context_value: Any = None,
    ) -> GraphQLCoreExecutableSchema:
        """Build an executable schema from a ``.graphql`` SDL file."""
        schema_path = Path(path)
        if not schema_path.is_file():
            raise SchemaLoadError(
                SCHEMA_FILE_NOT_FOUND_ERROR.format(path=schema_path),
                schema_path=str(schema_path),
            )
        logger.info("Loading GraphQL schema from %s", schema_path)
        return cls.from_sdl(
            schema_path.read_text(encoding="utf-8"),
            root_value=root_value,
            context_value=context_value,
        )

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    def query(self, context: OperationContext) -> GraphQLResponse:
        return self._execute(context)

    def mutation(self, context: OperationContext) -> GraphQLResponse:
        return self._execute(context)

    def _execute(self, context: OperationContext) -> GraphQLResponse:
        result = execute_sync(
            self._schema,
            context.document,
            root_value=self._root_value,
            context_value=self._context_value,
            variable_values=context.variables,
            operation_name=context.operation_name,
        )
        errors = tuple(error_item_from_graphql_error(e) for e in result.errors or ())
        if errors and logger.isEnabledFor(logging.DEBUG):
            logger.debug("Execution produced %d error(s)", len(errors))
        data = None
        if result.data is not None:
            data = dump_json(result.data)
        return GraphQLResponse(data=data, errors=errors)
