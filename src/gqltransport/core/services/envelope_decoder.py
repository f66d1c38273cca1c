from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from gqltransport.core.domain.graphql_request import RequestEnvelope
from gqltransport.core.domain.outcomes import DecodeFailed

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant {name!r}")


def _format_validation_error(exc: ValidationError) -> str:
    """Reduce a pydantic error to ``<field>: <message>`` for the first problem."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = first.get("msg", str(exc))
    return f"{location}: {message}" if location else message


def decode_envelope(body: bytes) -> RequestEnvelope | DecodeFailed:
    """Decode a raw request body into a request envelope.

    Args:
        body: The request body exactly as received

    Returns:
        The decoded envelope, or ``DecodeFailed`` carrying the decoder's
        diagnostic message
    """
    try:
        payload = json.loads(body, parse_constant=_reject_constant)
    except ValueError as exc:
        # Covers JSONDecodeError and UnicodeDecodeError
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Request body is not valid JSON: %s", exc)
        return DecodeFailed(detail=str(exc))

    try:
        return RequestEnvelope.model_validate(payload)
    except ValidationError as exc:
        detail = _format_validation_error(exc)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Request body has the wrong shape: %s", detail)
        return DecodeFailed(detail=detail)
