from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from gqltransport.core.constants import (
    APPLICATION_JSON,
    HTTP_500_INTERNAL_SERVER_ERROR,
    INTERNAL_SYSTEM_ERROR,
)
from gqltransport.core.domain.outcomes import ErrorItem
from gqltransport.core.services.response_encoder import encode_body

logger = logging.getLogger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Answer unexpected failures with a GraphQL-shaped 500 body."""
    if isinstance(exc, StarletteHTTPException):
        raise exc

    logger.error(
        "Unhandled exception while serving %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return Response(
        content=encode_body((ErrorItem(message=INTERNAL_SYSTEM_ERROR),), b"null"),
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        media_type=APPLICATION_JSON,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register the application's exception handlers.

    Args:
        app: The FastAPI application to register handlers for
    """
    app.add_exception_handler(Exception, unhandled_exception_handler)
