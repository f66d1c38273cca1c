"""
Common exception classes for the GraphQL transport.

Request handling never raises these: every request outcome is a value
(see ``gqltransport.core.domain.outcomes``). They cover start-up problems
such as unreadable configuration or schema files.
"""

from __future__ import annotations


class GraphQLTransportError(Exception):
    """Base exception class for all transport errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(GraphQLTransportError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details)


class SchemaLoadError(GraphQLTransportError):
    """Raised when the GraphQL schema cannot be read or built."""

    def __init__(
        self,
        message: str = "Schema could not be loaded",
        schema_path: str | None = None,
        details: dict | None = None,
    ):
        super().__init__(message, details)
        self.schema_path = schema_path
