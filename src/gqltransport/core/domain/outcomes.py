"""
Tagged request outcomes.

A request produces exactly one outcome. Each pipeline stage either hands its
value to the next stage or stops with one of the failure outcomes below; the
response encoder maps every outcome type to a status code and a body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from graphql import DocumentNode, GraphQLSchema, OperationDefinitionNode

from gqltransport.core.interfaces.model_bases import InternalDTO

PathSegment = Union[str, int]


@dataclass(frozen=True)
class Location(InternalDTO):
    line: int
    column: int

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass(frozen=True)
class ErrorItem(InternalDTO):
    """A single entry of the ``errors`` array.

    Optional members that are ``None`` are left out of the serialized form
    rather than written as ``null``.
    """

    message: str
    locations: tuple[Location, ...] | None = None
    path: tuple[PathSegment, ...] | None = None
    extensions: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        item: dict[str, Any] = {"message": self.message}
        if self.locations is not None:
            item["locations"] = [loc.to_dict() for loc in self.locations]
        if self.path is not None:
            item["path"] = list(self.path)
        if self.extensions is not None:
            item["extensions"] = self.extensions
        return item


@dataclass(frozen=True)
class GraphQLResponse(InternalDTO):
    """What an operation handler returns: raw JSON data and/or errors."""

    data: bytes | None = None
    errors: tuple[ErrorItem, ...] = ()

    @classmethod
    def error_response(cls, message: str) -> GraphQLResponse:
        return cls(data=None, errors=(ErrorItem(message=message),))


@dataclass(frozen=True)
class OperationContext(InternalDTO):
    """Everything an operation handler needs to execute the selected operation.

    ``variables`` holds the values exactly as sent by the client and
    ``coerced_variables`` the values after input coercion.
    """

    schema: GraphQLSchema
    document: DocumentNode
    operation: OperationDefinitionNode
    operation_name: str | None = None
    variables: dict[str, Any] = field(default_factory=dict)
    coerced_variables: dict[str, Any] = field(default_factory=dict)
    extensions: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Success(InternalDTO):
    data: bytes
    errors: tuple[ErrorItem, ...] = ()


@dataclass(frozen=True)
class TransportRejected(InternalDTO):
    pass


@dataclass(frozen=True)
class DecodeFailed(InternalDTO):
    detail: str


@dataclass(frozen=True)
class SyntaxFailed(InternalDTO):
    message: str
    locations: tuple[Location, ...] = ()


@dataclass(frozen=True)
class ValidationFailed(InternalDTO):
    errors: tuple[ErrorItem, ...]


@dataclass(frozen=True)
class VariableFailed(InternalDTO):
    message: str
    path: tuple[PathSegment, ...]


@dataclass(frozen=True)
class ExecutionFailed(InternalDTO):
    errors: tuple[ErrorItem, ...]


Outcome = Union[
    Success,
    TransportRejected,
    DecodeFailed,
    SyntaxFailed,
    ValidationFailed,
    VariableFailed,
    ExecutionFailed,
]
