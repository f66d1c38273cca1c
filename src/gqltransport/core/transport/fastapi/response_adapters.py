"""
FastAPI response adapters.

Converts the encoder's ``ResponseEnvelope`` into a Starlette ``Response``.
"""

from __future__ import annotations

from fastapi.responses import Response

from gqltransport.core.domain.responses import ResponseEnvelope


def to_fastapi_response(envelope: ResponseEnvelope) -> Response:
    """Convert a domain response envelope to a FastAPI response.

    The body is passed through untouched; re-serializing it would break the
    byte-exact payloads clients compare against.
    """
    return Response(
        content=envelope.content,
        status_code=envelope.status_code,
        headers=dict(envelope.headers),
        media_type=envelope.media_type,
    )
