from __future__ import annotations

from abc import ABC, abstractmethod

from graphql import GraphQLSchema

from gqltransport.core.domain.outcomes import GraphQLResponse, OperationContext


class IExecutableSchema(ABC):
    """Interface for the schema plus operation handlers shared by all requests.

    Implementations are built once and must not be mutated while requests are
    being served; the transport calls them concurrently from worker threads.
    """

    @property
    @abstractmethod
    def schema(self) -> GraphQLSchema:
        """Schema used to validate incoming documents."""

    @abstractmethod
    def query(self, context: OperationContext) -> GraphQLResponse:
        """Execute a query operation.

        Args:
            context: The parsed and validated operation with its variables

        Returns:
            Response data, resolver errors, or both
        """

    @abstractmethod
    def mutation(self, context: OperationContext) -> GraphQLResponse:
        """Execute a mutation operation.

        Args:
            context: The parsed and validated operation with its variables

        Returns:
            Response data, resolver errors, or both
        """
