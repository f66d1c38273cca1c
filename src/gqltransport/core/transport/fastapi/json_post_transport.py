"""
JSON POST transport.

Claims ``POST`` requests carrying ``application/json`` bodies, decodes the
GraphQL request envelope and runs it through the execution dispatcher. Any
request the transport does not support is answered with the
"transport not supported" response without reading its body.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import Response
from starlette.concurrency import run_in_threadpool

from gqltransport.core.domain.outcomes import DecodeFailed, Outcome, TransportRejected
from gqltransport.core.services import content_negotiator
from gqltransport.core.services.envelope_decoder import decode_envelope
from gqltransport.core.services.execution_dispatcher import ExecutionDispatcher
from gqltransport.core.services.response_encoder import encode_outcome
from gqltransport.core.transport.fastapi.response_adapters import to_fastapi_response

logger = logging.getLogger(__name__)


class JsonPostTransport:
    """Starlette endpoint for GraphQL over JSON POST."""

    def __init__(self, dispatcher: ExecutionDispatcher) -> None:
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> ExecutionDispatcher:
        return self._dispatcher

    def supports(self, request: Request) -> bool:
        return content_negotiator.supports(
            request.method, request.headers.get("content-type")
        )

    async def resolve_outcome(self, request: Request) -> Outcome:
        """Produce the single outcome for a request."""
        if not self.supports(request):
            return TransportRejected()

        body = await request.body()
        envelope = decode_envelope(body)
        if isinstance(envelope, DecodeFailed):
            return envelope

        # The engine is synchronous; keep it off the event loop.
        return await run_in_threadpool(self._dispatcher.dispatch, envelope)

    async def handle(self, request: Request) -> Response:
        outcome = await self.resolve_outcome(request)
        envelope = encode_outcome(outcome)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "GraphQL request finished: outcome=%s status=%d",
                type(outcome).__name__,
                envelope.status_code,
            )
        return to_fastapi_response(envelope)
