from __future__ import annotations

from graphql import GraphQLError

from gqltransport.core.domain.outcomes import ErrorItem, Location


def locations_from_graphql_error(error: GraphQLError) -> tuple[Location, ...] | None:
    if not error.locations:
        return None
    return tuple(Location(line=loc.line, column=loc.column) for loc in error.locations)


def error_item_from_graphql_error(error: GraphQLError) -> ErrorItem:
    """Convert an engine error into an ``errors`` array entry."""
    return ErrorItem(
        message=error.message,
        locations=locations_from_graphql_error(error),
        path=tuple(error.path) if error.path else None,
        extensions=error.extensions or None,
    )
