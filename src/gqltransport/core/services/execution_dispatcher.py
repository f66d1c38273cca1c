"""
Execution dispatcher.

Drives the engine pipeline for one request envelope:

1. parse the query text
2. validate it against the shared schema and select the operation
3. coerce the declared variables
4. hand the operation to the query or mutation handler

Every stage returns either the value the next stage needs or a failure
outcome. The first failure ends the pipeline, so a response never mixes
errors from two stages.
"""

from __future__ import annotations

import logging
from typing import Any

from graphql import (
    DocumentNode,
    GraphQLSchema,
    GraphQLSyntaxError,
    OperationDefinitionNode,
    OperationType,
    get_operation_ast,
    parse,
    validate,
)

from gqltransport.core.constants import (
    INTERNAL_SYSTEM_ERROR,
    OPERATION_NAME_REQUIRED_ERROR,
    SUBSCRIPTIONS_NOT_SUPPORTED_ERROR,
    UNKNOWN_OPERATION_NAMED_ERROR,
)
from gqltransport.core.domain.graphql_request import RequestEnvelope
from gqltransport.core.domain.outcomes import (
    ErrorItem,
    ExecutionFailed,
    GraphQLResponse,
    OperationContext,
    Outcome,
    Success,
    SyntaxFailed,
    ValidationFailed,
    VariableFailed,
)
from gqltransport.core.interfaces.executable_schema_interface import (
    IExecutableSchema,
)
from gqltransport.core.services.error_conversion import (
    error_item_from_graphql_error,
    locations_from_graphql_error,
)
from gqltransport.core.services.variable_coercion import coerce_variables

logger = logging.getLogger(__name__)


def parse_query(query: str) -> DocumentNode | SyntaxFailed:
    try:
        return parse(query)
    except GraphQLSyntaxError as exc:
        return SyntaxFailed(
            message=exc.message, locations=locations_from_graphql_error(exc) or ()
        )


def select_operation(
    document: DocumentNode, operation_name: str | None
) -> OperationDefinitionNode | ValidationFailed:
    operation = get_operation_ast(document, operation_name)
    if operation is not None:
        return operation
    if operation_name:
        message = UNKNOWN_OPERATION_NAMED_ERROR.format(name=operation_name)
    else:
        message = OPERATION_NAME_REQUIRED_ERROR
    return ValidationFailed(errors=(ErrorItem(message=message),))


def validate_document(
    schema: GraphQLSchema, document: DocumentNode, operation_name: str | None
) -> OperationDefinitionNode | ValidationFailed:
    errors = validate(schema, document)
    if errors:
        return ValidationFailed(
            errors=tuple(error_item_from_graphql_error(error) for error in errors)
        )
    return select_operation(document, operation_name)


class ExecutionDispatcher:
    """Runs request envelopes through the engine pipeline.

    The dispatcher holds only the shared executable schema and keeps no
    per-request state, so one instance serves concurrent requests.
    """

    def __init__(self, executable_schema: IExecutableSchema) -> None:
        self._executable_schema = executable_schema

    @property
    def executable_schema(self) -> IExecutableSchema:
        return self._executable_schema

    def dispatch(self, envelope: RequestEnvelope) -> Outcome:
        """Run one envelope through parse, validate, coerce and execute.

        Args:
            envelope: A successfully decoded request envelope

        Returns:
            The outcome of the first failing stage, or the execution result
        """
        schema = self._executable_schema.schema

        document = parse_query(envelope.query)
        if isinstance(document, SyntaxFailed):
            self._log_failure("parse", document)
            return document

        operation = validate_document(schema, document, envelope.operation_name)
        if isinstance(operation, ValidationFailed):
            self._log_failure("validate", operation)
            return operation

        coerced = coerce_variables(schema, operation, envelope.variables)
        if isinstance(coerced, VariableFailed):
            self._log_failure("coerce", coerced)
            return coerced

        context = OperationContext(
            schema=schema,
            document=document,
            operation=operation,
            operation_name=envelope.operation_name,
            variables=dict(envelope.variables),
            coerced_variables=coerced,
            extensions=dict(envelope.extensions),
        )
        return self._execute(context)

    def _execute(self, context: OperationContext) -> Outcome:
        kind = context.operation.operation
        try:
            if kind is OperationType.QUERY:
                response = self._executable_schema.query(context)
            elif kind is OperationType.MUTATION:
                response = self._executable_schema.mutation(context)
            else:
                return ExecutionFailed(
                    errors=(ErrorItem(message=SUBSCRIPTIONS_NOT_SUPPORTED_ERROR),)
                )
        except Exception:
            logger.error(
                "Operation handler raised for %s operation", kind.value, exc_info=True
            )
            return ExecutionFailed(errors=(ErrorItem(message=INTERNAL_SYSTEM_ERROR),))

        return self._outcome_from_response(response)

    @staticmethod
    def _outcome_from_response(response: GraphQLResponse) -> Outcome:
        if response.data is None:
            if response.errors:
                return ExecutionFailed(errors=tuple(response.errors))
            return Success(data=b"null")
        return Success(data=response.data, errors=tuple(response.errors))

    @staticmethod
    def _log_failure(stage: str, outcome: Any) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("GraphQL %s stage failed: %r", stage, outcome)
