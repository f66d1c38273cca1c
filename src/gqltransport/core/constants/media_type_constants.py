"""Media types understood by the transport."""

APPLICATION_JSON = "application/json"
CONTENT_TYPE_HEADER = "Content-Type"
