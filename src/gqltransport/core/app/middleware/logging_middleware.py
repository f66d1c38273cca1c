from __future__ import annotations

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from gqltransport.core.common.logging_utils import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging requests and responses."""

    def __init__(
        self,
        app: ASGIApp,
        log_requests: bool = False,
        log_responses: bool = False,
    ) -> None:
        super().__init__(app)
        self.log_requests = log_requests
        self.log_responses = log_responses

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        if self.log_requests:
            logger.info(
                "Request received",
                method=request.method,
                url=str(request.url),
                client=request.client.host if request.client else "unknown",
            )

        response = await call_next(request)

        if self.log_responses:
            logger.info(
                "Response sent",
                status_code=response.status_code,
                duration_ms=(time.perf_counter() - start_time) * 1000,
            )

        return response
